"""
Tests para la configuración de logging.
"""

import json
import logging
from datetime import date

import pytest

from app.core.shared.logger import (
    ColoredFormatter,
    JSONFormatter,
    LevelRangeFilter,
    configure_logging,
    mask_secret,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _record(level: int, message: str = "mensaje") -> logging.LogRecord:
    return logging.LogRecord("app.test", level, __file__, 10, message, None, None)


class TestFormatters:
    def test_json_formatter(self):
        record = _record(logging.INFO, "hola")
        record.correlation_id = "abc123"

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["message"] == "hola"
        assert data["logger"] == "app.test"
        assert data["correlation_id"] == "abc123"

    def test_colored_formatter_does_not_alter_record(self):
        record = _record(logging.WARNING)

        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[33m" in output
        assert record.levelname == "WARNING"


class TestLevelRangeFilter:
    def test_filters_by_range(self):
        level_filter = LevelRangeFilter(logging.INFO, logging.WARNING)

        assert not level_filter.filter(_record(logging.DEBUG))
        assert level_filter.filter(_record(logging.INFO))
        assert level_filter.filter(_record(logging.WARNING))
        assert not level_filter.filter(_record(logging.ERROR))


class TestConfigureLogging:
    def test_console_only(self, restore_root_logger):
        configure_logging(level="WARNING", format_type="plain")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_daily_files_by_level(self, restore_root_logger, tmp_path):
        configure_logging(level="DEBUG", format_type="json", log_dir=tmp_path / "logs")
        logger = logging.getLogger("app.test.files")

        logger.debug("detalle")
        logger.info("informacion")
        logger.error("falla")
        for handler in restore_root_logger.handlers:
            handler.flush()

        stamp = date.today().isoformat()
        general = (tmp_path / "logs" / f"{stamp}.log").read_text(encoding="utf-8")
        debug = (tmp_path / "logs" / f"{stamp}-debug.log").read_text(encoding="utf-8")
        errors = (tmp_path / "logs" / f"{stamp}-error.log").read_text(encoding="utf-8")

        assert "informacion" in general and "falla" not in general and "detalle" not in general
        assert "detalle" in debug and "informacion" not in debug
        assert "falla" in errors and "informacion" not in errors


class TestMaskSecret:
    @pytest.mark.parametrize(
        "value, expected",
        [(None, "<empty>"), ("", "<empty>"), ("abc", "***"), ("eyJhbGciOiJIUzI1NiJ9", "eyJhbG***")],
    )
    def test_mask(self, value, expected):
        assert mask_secret(value) == expected
