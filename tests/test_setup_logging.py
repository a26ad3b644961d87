import logging

import pytest

from reqlab.setup_logging import HANDLER_NAME, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _ours(root):
    return [h for h in root.handlers if h.get_name() == HANDLER_NAME]


def test_handler_is_added_once(root_logger):
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    assert len(_ours(root_logger)) == 1
    assert root_logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("chatty")
    assert root_logger.level == logging.INFO


def test_noisy_libraries_are_quieted(root_logger):
    setup_logging("DEBUG", quiet=("urllib3", "reqlab.test.noisy"))
    assert logging.getLogger("urllib3").level == logging.WARNING
    assert logging.getLogger("reqlab.test.noisy").level == logging.WARNING
