"""
Tests for the command line entry point.
"""

import logging

import pytest

import main
from log_module import RunLogger


@pytest.fixture
def quiet_logging(tmp_path, monkeypatch):
    """Keep cli() from installing handlers; caplog still sees the records."""
    log_file = tmp_path / "debug-log.txt"

    def fake_setup_logging(config):
        return RunLogger(str(log_file))

    monkeypatch.setattr(main, "setup_logging", fake_setup_logging)
    return log_file


@pytest.fixture
def run_cli(tmp_path, quiet_logging, caplog):
    caplog.set_level(logging.DEBUG)

    def _run(*args):
        return main.cli(["--config", str(tmp_path / "no-config.yml"), *[str(a) for a in args]])

    return _run


class TestCli:

    def test_success(self, run_cli, sample_xml_path, tmp_path, caplog):
        output_path = tmp_path / "out" / "chain.xml"

        exit_code = run_cli(sample_xml_path, 6, output_path)

        assert exit_code == 0
        assert output_path.read_text(encoding="utf-8").splitlines()[-1] == '        <level4 id="target">'
        assert f"Extracting ancestor chain from {sample_xml_path} at line 6..." in caplog.text
        assert "Found 5 ancestor(s) in the chain." in caplog.text
        assert f"Success! Ancestor chain written to: {output_path}" in caplog.text

    @pytest.mark.parametrize("line_number", ["abc", "0", "-3", "1.5"])
    def test_invalid_line_number(self, run_cli, sample_xml_path, tmp_path, caplog, line_number):
        output_path = tmp_path / "out.xml"

        exit_code = run_cli(sample_xml_path, line_number, output_path)

        assert exit_code == 1
        assert "Error: Line number must be a positive integer" in caplog.text
        assert not output_path.exists()

    def test_extraction_error(self, run_cli, sample_xml_path, tmp_path, caplog):
        exit_code = run_cli(sample_xml_path, 10, tmp_path / "out.xml")

        assert exit_code == 1
        assert "Error: Line 10 contains a self-closing tag, which is not allowed" in caplog.text

    def test_missing_file(self, run_cli, tmp_path, caplog):
        exit_code = run_cli(tmp_path / "missing.xml", 1, tmp_path / "out.xml")

        assert exit_code == 1
        assert "Error: File not found:" in caplog.text

    def test_unexpected_error(self, run_cli, sample_xml_path, tmp_path, caplog, monkeypatch):
        def explode(file_path, target_line):
            raise RuntimeError("boom")

        monkeypatch.setattr(main, "extract_ancestors", explode)

        exit_code = run_cli(sample_xml_path, 2, tmp_path / "out.xml")

        assert exit_code == 1
        assert "Unexpected error: boom" in caplog.text

    def test_invalid_config_file(self, tmp_path, quiet_logging, sample_xml_path, capsys):
        config_path = tmp_path / "config.yml"
        config_path.write_text("[not, a, mapping]\n")

        exit_code = main.cli(["--config", str(config_path), str(sample_xml_path), "2", str(tmp_path / "out.xml")])

        assert exit_code == 1
        assert "must contain a mapping" in capsys.readouterr().err

    def test_summary_repeats_errors(self, run_cli, quiet_logging, sample_xml_path, tmp_path, capsys, monkeypatch):
        def log_error_to_file(xml_file, line_number, output_file):
            with open(quiet_logging, "a") as file:
                file.write("2026-01-01 00:00:00,000 - ERROR - Error: simulated\n")
            return 1

        monkeypatch.setattr(main, "main", log_error_to_file)

        exit_code = run_cli("--summary", sample_xml_path, 2, tmp_path / "out.xml")

        assert exit_code == 1
        assert "ERROR - Error: simulated" in capsys.readouterr().out

    def test_missing_arguments(self, run_cli):
        with pytest.raises(SystemExit) as excinfo:
            run_cli("only-one-argument")
        assert excinfo.value.code == 2


class TestParseLineNumber:

    @pytest.mark.parametrize("value, expected", [("1", 1), ("42", 42), (" 7 ", 7), ("0", None), ("-1", None), ("x", None), (None, None)])
    def test_parse(self, value, expected):
        assert main.parse_line_number(value) == expected


class TestMain:

    def test_returns_zero_on_success(self, sample_xml_path, tmp_path):
        assert main.main(str(sample_xml_path), 3, str(tmp_path / "out.xml")) == 0

    def test_returns_one_on_failure(self, sample_xml_path, tmp_path):
        assert main.main(str(sample_xml_path), 999, str(tmp_path / "out.xml")) == 1
