"""Tests for the logging helpers."""

from __future__ import annotations

import logging

from pydataview import ArrayDataReader, GridView, log
from pydataview.column import SerialColumn


class TestLogger:
    """Tests for the package logger."""

    def test_level_from_settings(self, monkeypatch):
        """The level is read from LogSettings."""
        monkeypatch.setenv("PYDATAVIEW_LOG__LEVEL", "ERROR")
        assert log.get_logger().level == logging.ERROR

    def test_default_level(self):
        """Warnings and above are logged by default."""
        assert log.get_logger().level == logging.WARNING

    def test_set_level(self):
        """Levels can be given by name."""
        log.set_level("info")
        assert log.get_logger().level == logging.INFO

    def test_messages(self, caplog):
        """Helpers log at their level."""
        log.enable_debug()
        with caplog.at_level(logging.DEBUG, logger="pydataview"):
            log.debug("details")
            log.warn("careful")
        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("DEBUG", "details"),
            ("WARNING", "careful"),
        ]

    def test_rendering_debug_messages(self, caplog):
        """Rendering reports renderer creation and row counts at DEBUG."""
        log.enable_debug()
        with caplog.at_level(logging.DEBUG, logger="pydataview"):
            GridView(data_reader=ArrayDataReader([{}, {}]), columns=[SerialColumn()]).render()
        messages = [r.getMessage() for r in caplog.records]
        assert "Created renderer SerialColumnRenderer" in messages
        assert "Rendering grid with 1 columns and 2 rows" in messages
