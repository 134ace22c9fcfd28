import logging

from face_quiz.utils.logging_config import configure_logging


def test_configure_logging_returns_package_logger():
    logger = configure_logging(logging.DEBUG)
    assert logger.name == "face_quiz"
    assert logging.getLogger("face_quiz.core.quiz_session").parent is not None
