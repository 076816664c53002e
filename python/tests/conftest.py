import logging

import pytest


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made to the root logger"""
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers.copy()
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
