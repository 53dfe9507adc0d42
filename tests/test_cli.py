"""Test the descript-ion command-line tool."""
import logging

import pytest

from descript_ion.cli import EXIT_IO_ERROR, EXIT_NOT_FOUND, EXIT_OK, main


@pytest.fixture(autouse=True)
def no_config(tmp_path, monkeypatch):
    monkeypatch.setenv("DESCRIPT_ION_CONFIG", str(tmp_path / "absent.yaml"))


@pytest.fixture
def catalog_dir(tmp_path):
    directory = tmp_path / "files"
    directory.mkdir()
    (directory / "DESCRIPT.ION").write_bytes(
        b"GAME.ZIP A fun game\x04d\r\n"
        b"README.TXT Line1\\nLine2\x04x\r\n"
        b"broken line\r\n"
        b"GAME.ZIP Newer description\x04d\r\n"
    )
    (directory / "GAME.ZIP").write_bytes(b"PK\x03\x04")
    return directory


def test_show(catalog_dir, capsys):
    assert main(["show", str(catalog_dir / "DESCRIPT.ION")]) == EXIT_OK

    out = capsys.readouterr().out
    assert "GAME.ZIP" in out
    assert "Newer description" in out
    assert "A fun game" not in out
    assert "Line1\n    Line2" in out


def test_show_raw(catalog_dir, capsys):
    assert main(["show", str(catalog_dir), "--raw"]) == EXIT_OK

    assert "Line1\\r\\nLine2" in capsys.readouterr().out


def test_lookup(catalog_dir, capsys):
    assert main(["lookup", str(catalog_dir), "GAME.ZIP"]) == EXIT_OK

    assert capsys.readouterr().out.strip() == "Newer description"


def test_lookup_unknown_name(catalog_dir, capsys):
    assert main(["lookup", str(catalog_dir), "game.zip"]) == EXIT_NOT_FOUND

    assert "No description for game.zip" in capsys.readouterr().err


def test_stats(catalog_dir, capsys):
    assert main(["stats", str(catalog_dir)]) == EXIT_OK

    out = capsys.readouterr().out
    assert "matched:   3" in out
    assert "entries:   2" in out
    assert "discarded: 1" in out


def test_ls(catalog_dir, capsys):
    assert main(["ls", str(catalog_dir)]) == EXIT_OK

    out = capsys.readouterr().out
    assert "GAME.ZIP" in out
    assert "Newer description" in out
    assert "DESCRIPT.ION" not in out


def test_missing_file(tmp_path, capsys):
    assert main(["show", str(tmp_path / "nope.ion")]) == EXIT_IO_ERROR

    assert "Error:" in capsys.readouterr().err


def test_directory_without_catalog(tmp_path, capsys):
    assert main(["lookup", str(tmp_path), "A.TXT"]) == EXIT_IO_ERROR

    assert "No catalog file" in capsys.readouterr().err


def test_bad_code_page(catalog_dir, capsys):
    assert main(["--code-page", "bogus", "show", str(catalog_dir)]) == EXIT_IO_ERROR


def test_code_page_option(tmp_path, capsys):
    path = tmp_path / "DESCRIPT.ION"
    path.write_bytes(b"CAF\xe9.TXT Menu\x04d\r\n")

    assert main(["--code-page", "latin-1", "show", str(path)]) == EXIT_OK
    assert "CAFé.TXT" in capsys.readouterr().out


def test_malformed_config_file(tmp_path, catalog_dir, capsys):
    config = tmp_path / "bad.yaml"
    config.write_text("catalog: [unclosed\n")

    assert main(["--config", str(config), "show", str(catalog_dir)]) == EXIT_IO_ERROR
    assert "Invalid config file" in capsys.readouterr().err


def test_unknown_logging_level(tmp_path, catalog_dir, capsys):
    config = tmp_path / "loud.yaml"
    config.write_text("logging:\n  level: LOUD\n")

    assert main(["--config", str(config), "show", str(catalog_dir)]) == EXIT_IO_ERROR
    assert "Unknown logging level" in capsys.readouterr().err


def test_multibyte_code_page(catalog_dir, capsys):
    assert main(["--code-page", "utf-16", "stats", str(catalog_dir)]) == EXIT_IO_ERROR
    assert "Not a single-byte code page" in capsys.readouterr().err


def test_verbose_logs_config_path(tmp_path, catalog_dir, caplog):
    config = tmp_path / "descript_ion.yaml"
    config.write_text("catalog:\n  code_page: cp850\n")

    with caplog.at_level(logging.DEBUG, logger="descript_ion.cli"):
        assert main(["--verbose", "--config", str(config), "show", str(catalog_dir)]) == EXIT_OK

    assert str(config) in caplog.text
    assert "cp850" in caplog.text
