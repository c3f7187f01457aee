"""Tests for logging configuration."""

from catalog_viewer.config import settings
from catalog_viewer.utils.logger import logger, setup_logger


def test_file_sink_receives_messages(tmp_path):
    """Test a configured log file gets messages at or above the level."""
    log_file = tmp_path / "catalog.log"

    try:
        setup_logger(level="info", log_file=str(log_file))
        logger.debug("hidden request detail")
        logger.info("Loaded 4 products")
    finally:
        setup_logger()

    content = log_file.read_text()
    assert "INFO" in content
    assert "Loaded 4 products" in content
    assert "hidden request detail" not in content


def test_no_file_sink_by_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "log_file", None)

    setup_logger()
    logger.info("console only")

    assert list(tmp_path.iterdir()) == []
