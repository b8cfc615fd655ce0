"""Tests for the loguru configuration."""

from ccdb.utils.logging import configure_file_logging, logger


class TestFileLogging:
    """configure_file_logging adds a removable file sink."""

    def test_writes_debug_records(self, tmp_path):
        handler_id = configure_file_logging(tmp_path / "logs")
        try:
            logger.debug("Loaded {records} compile commands", records=12)
        finally:
            logger.remove(handler_id)

        content = (tmp_path / "logs" / "ccdb.log").read_text(encoding="utf-8")
        assert "DEBUG" in content
        assert "Loaded 12 compile commands" in content

    def test_level_filter(self, tmp_path):
        handler_id = configure_file_logging(tmp_path, level="WARNING")
        try:
            logger.info("quiet")
            logger.warning("Path is ambiguous")
        finally:
            logger.remove(handler_id)

        content = (tmp_path / "ccdb.log").read_text(encoding="utf-8")
        assert "quiet" not in content
        assert "Path is ambiguous" in content
