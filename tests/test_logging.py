import logging
import sys
from logging.handlers import RotatingFileHandler

from apple_calendar_mcp import logging as app_logging


def test_configure_logging_writes_to_file_and_stderr(monkeypatch, tmp_path):
    monkeypatch.setattr(app_logging, "_INITIALIZED", False)
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    log_path = tmp_path / "logs" / "calendar.log"

    try:
        app_logging.configure_logging("debug", log_path=log_path)
        added = [handler for handler in root.handlers if handler not in before]
        assert any(isinstance(handler, RotatingFileHandler) for handler in added)
        consoles = [h for h in added if type(h) is logging.StreamHandler]
        assert consoles and all(h.stream is sys.stderr for h in consoles)
        assert root.level == logging.DEBUG

        logging.getLogger("apple_calendar_mcp.test").info("hello calendar")
        for handler in added:
            handler.flush()
        assert "hello calendar" in log_path.read_text(encoding="utf-8")

        # Second call is a no-op.
        app_logging.configure_logging()
        assert len(root.handlers) == len(before) + len(added)
    finally:
        root.setLevel(level)
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
