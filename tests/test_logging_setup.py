import logging

from taskzen.logging_setup import setup_logging


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    try:
        setup_logging("debug")
        setup_logging("debug")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        root.setLevel(saved[0])
        for h in saved[1]:
            root.addHandler(h)
