import logging
from contextlib import contextmanager

from home_service_api.app.core.logging_config import setup_logging


@contextmanager
def root_handlers(*handlers):
    """Temporarily replace the root logger's handlers and level."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers[:] = list(handlers)
    try:
        yield root
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_log_file_directory_is_created(tmp_path):
    log_file = tmp_path / "logs" / "api.log"
    with root_handlers() as root:
        setup_logging("debug", str(log_file))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        logging.getLogger("home_service_api.tests").info("hello file")
        for handler in root.handlers:
            handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")


def test_configured_root_is_left_alone(tmp_path):
    existing = logging.NullHandler()
    with root_handlers(existing) as root:
        setup_logging("INFO", str(tmp_path / "unused.log"))
        assert root.handlers == [existing]
    assert not (tmp_path / "unused.log").exists()
