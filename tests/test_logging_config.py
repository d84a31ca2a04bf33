import logging

import pytest

from matrixcalc.logging_config import setup_logging
from matrixcalc.model.state import Event, Session


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("matrixcalc")
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_level_by_name():
    logger = setup_logging("debug")
    assert logger.level == logging.DEBUG


def test_unknown_level_name():
    with pytest.raises(ValueError):
        setup_logging("chatty")


def test_log_file_receives_transitions(tmp_path):
    log_file = tmp_path / "calc.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))

    session = Session().feed("1,2;3,4")
    session.handle_event(Event.confirm())
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "Transition collect_a -> select_op_a" in content
