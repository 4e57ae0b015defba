"""
Tests for the run logger.
"""

import logging
import time

import pytest

from log_module import LOG_FORMAT, RunLogger


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "debug-log.txt"


def _stamp(seconds_ago):
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(time.time() - seconds_ago)) + ",000"


class TestRunLogger:

    def test_mark_start_on_new_file(self, log_file):
        run_logger = RunLogger(str(log_file))

        position = run_logger.mark_start_of_run_in_log()

        assert position == 0
        assert "===== Run Start:" in log_file.read_text()

    def test_mark_start_returns_previous_size(self, log_file):
        log_file.write_text("earlier run\n")
        run_logger = RunLogger(str(log_file))

        position = run_logger.mark_start_of_run_in_log()

        assert position == len("earlier run\n")

    def test_cleanup_drops_old_and_unparsable_lines(self, log_file):
        recent = f"{_stamp(60)} - INFO - recent\n"
        old = f"{_stamp(3 * 24 * 3600)} - INFO - old\n"
        log_file.write_text(old + "no timestamp here\n" + recent + "\n")

        RunLogger(str(log_file), retention_hours=24).cleanup_old_logs()

        assert log_file.read_text() == recent

    def test_cleanup_without_log_file(self, log_file):
        RunLogger(str(log_file)).cleanup_old_logs()

        assert not log_file.exists()

    def test_print_warnings_and_errors_since_start(self, log_file, capsys):
        log_file.write_text(f"{_stamp(10)} - ERROR - from a previous run\n")
        run_logger = RunLogger(str(log_file))
        start = run_logger.mark_start_of_run_in_log()
        with open(log_file, "a") as file:
            file.write(f"{_stamp(0)} - INFO - fine\n")
            file.write(f"{_stamp(0)} - WARNING - watch out\n")
            file.write(f"{_stamp(0)} - ERROR - broken\n")

        run_logger.print_warnings_and_errors_from_log(start)

        printed = capsys.readouterr().out.splitlines()
        assert [line.split(" - ", 1)[1] for line in printed] == ["WARNING - watch out", "ERROR - broken"]

    def test_print_warnings_without_log_file(self, log_file, capsys):
        RunLogger(str(log_file)).print_warnings_and_errors_from_log(0)

        assert capsys.readouterr().out == "Log file not found.\n"

    def test_setup_logging_writes_debug_to_file(self, log_file, restore_root_handlers):
        run_logger = RunLogger(str(log_file), console_level="WARNING", file_level="DEBUG")
        run_logger.setup_logging()

        logging.getLogger("ancestor_path.extractor").debug("looking for <root>")
        for handler in run_logger.handlers:
            handler.flush()

        assert " - DEBUG - looking for <root>" in log_file.read_text()

    def test_setup_logging_twice_does_not_duplicate_handlers(self, log_file, restore_root_handlers):
        root = logging.getLogger()
        before = len(root.handlers)
        run_logger = RunLogger(str(log_file))

        run_logger.setup_logging()
        run_logger.setup_logging()

        assert len(root.handlers) == before + 2
        assert all(handler.formatter._fmt == LOG_FORMAT for handler in run_logger.handlers)
