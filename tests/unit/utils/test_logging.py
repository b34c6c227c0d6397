import logging

import pytest

from farkle.utils.logging import (
    configure_logging,
    parse_level,
    setup_info_logging,
    setup_warning_logging,
)


def test_setup_info_logging_creates_file_and_sets_level(tmp_path, preserve_root_logger):
    log_file = tmp_path / "info.log"
    setup_info_logging(log_file)
    root = logging.getLogger()
    assert log_file.exists()
    assert root.level == logging.INFO


def test_setup_warning_logging_creates_file_and_sets_level(tmp_path, preserve_root_logger):
    log_file = tmp_path / "logs" / "warn.log"
    setup_warning_logging(log_file)
    root = logging.getLogger()
    assert log_file.exists()
    assert root.level == logging.WARNING


def test_handlers_replaced_and_console_logging(tmp_path, capsys, preserve_root_logger):
    log1 = tmp_path / "first.log"
    log2 = tmp_path / "second.log"

    setup_info_logging(log1)
    logging.info("first")
    capsys.readouterr()  # clear captured output

    setup_info_logging(log2)
    logging.info("second")
    captured = capsys.readouterr()
    assert "second" in captured.err

    root = logging.getLogger()
    assert any(
        isinstance(h, logging.FileHandler) and h.baseFilename == str(log2) for h in root.handlers
    )
    assert not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == str(log1) for h in root.handlers
    )

    assert "first" in log1.read_text()
    assert "second" not in log1.read_text()
    assert "second" in log2.read_text()


def test_numba_logger_is_quietened(preserve_root_logger):
    configure_logging(level="DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("numba").level == logging.WARNING


@pytest.mark.parametrize(
    "level, expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nonsense", logging.INFO), (40, 40)],
)
def test_parse_level(level, expected):
    assert parse_level(level) == expected
