import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any logging configuration made by setup_logging or the CLI."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
