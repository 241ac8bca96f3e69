"""文件读写（IniParser / IniYamlParser）的测试。"""

import logging
from pathlib import Path

import pytest

from pyinimgr import IniConfig, IniParser, IniYamlParser, ParsingError


@pytest.fixture()
def sample() -> IniConfig:
    ins = IniConfig()
    ins.set_string("user", "name", "bob")
    ins.set_int("user", "age", 30)
    ins.set_bool("misc", "flag", True)
    return ins


def test_write_uses_crlf(tmp_path: Path, sample: IniConfig) -> None:
    path = tmp_path / "conf.ini"
    IniParser(str(path)).write(sample)
    assert path.read_bytes() == (
        b"[misc]\r\nflag=True\r\n\r\n[user]\r\nname=bob\r\nage=30")


def test_file_round_trip(tmp_path: Path, sample: IniConfig) -> None:
    path = tmp_path / "conf.ini"
    handler = IniParser(str(path))
    handler.write(sample)
    again = handler.read()
    assert again.get_int("user", "age") == 30
    assert again.get_bool("misc", "flag") is True
    assert again.entries() == sorted(sample.entries(), key=lambda x: x.section)


def test_read_lf_file(tmp_path: Path) -> None:
    path = tmp_path / "conf.ini"
    path.write_text("[Food]\nCake=yes ; lie\n", encoding="utf-8")
    ins = IniParser(str(path), case_sensitive=True).read()
    assert ins.case_sensitive
    assert ins.get_string("Food", "Cake") == "yes"
    assert not ins.exists("food")


def test_read_into_merges(tmp_path: Path, sample: IniConfig) -> None:
    path = tmp_path / "patch.ini"
    path.write_text("[user]\nage=31\n", encoding="utf-8")
    IniParser(str(path)).read_into(sample, overwrite=False)
    assert sample.get_int("user", "age") == 31
    assert sample.get_string("user", "name") == "bob"


def test_missing_file_is_logged_and_raised(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "nope.ini"
    with caplog.at_level(logging.WARNING, logger="pyinimgr.ini.parser"):
        with pytest.raises(FileNotFoundError):
            IniParser(str(path)).read()
    assert "nope.ini" in caplog.text


def test_parser_str(tmp_path: Path) -> None:
    path = tmp_path / "conf.ini"
    assert str(IniParser(str(path))) == f"INI file: {path}(utf-8)"
    assert IniParser(str(path)).filename == str(path)


def test_yaml_round_trip(tmp_path: Path, sample: IniConfig) -> None:
    path = tmp_path / "conf.yaml"
    handler = IniYamlParser(str(path))
    handler.write(sample)
    again = handler.read()
    assert again.entries() == sample.entries()
    # all values are strings on disk.
    assert "age: '30'" in path.read_text(encoding="utf-8")


def test_yaml_scalars_become_canonical_text(tmp_path: Path) -> None:
    path = tmp_path / "conf.yaml"
    path.write_text(
        "net:\n  port: 8080\n  debug: true\n  ratio: 0.5\n  host: example.org\n",
        encoding="utf-8",
    )
    ins = IniYamlParser(str(path)).read()
    assert ins.get_string("net", "port") == "8080"
    assert ins.get_string("net", "debug") == "True"
    assert ins.get_string("net", "ratio") == "0.5"
    assert ins.get_string("net", "host") == "example.org"


def test_yaml_null_value_warns(tmp_path: Path) -> None:
    path = tmp_path / "conf.yaml"
    path.write_text("s:\n  k:\n", encoding="utf-8")
    with pytest.warns(UserWarning):
        ins = IniYamlParser(str(path)).read()
    assert ins.get_string("s", "k") == ""


def test_yaml_empty_document(tmp_path: Path) -> None:
    path = tmp_path / "conf.yaml"
    path.write_text("", encoding="utf-8")
    assert len(IniYamlParser(str(path)).read()) == 0


@pytest.mark.parametrize(
    "text", ["- a\n- b\n", "s: just text\n", "s:\n  k: [1, 2]\n"])
def test_yaml_bad_shape(tmp_path: Path, text: str) -> None:
    path = tmp_path / "conf.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ParsingError):
        IniYamlParser(str(path)).read()
