import logging

from spring_animation.logging_config import setup_logging


def test_setup_logging_writes_to_file_without_duplicate_handlers(tmp_path):
    log_file = tmp_path / "spring.log"
    first = setup_logging(logging.DEBUG)
    stale = list(first.handlers)
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        assert logger.name == "spring_animation"
        assert len(logger.handlers) == 2
        assert not any(handler in logger.handlers for handler in stale)
        logging.getLogger("spring_animation.animation.registry").debug("Adding animation x")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "DEBUG spring_animation.animation.registry: Adding animation x" in content
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_level_filters_debug_trace(tmp_path):
    log_file = tmp_path / "spring.log"
    logger = setup_logging(logging.INFO, str(log_file))
    try:
        logging.getLogger("spring_animation.animation.registry").debug("Stepping animation x")
        logging.getLogger("spring_animation.animation.registry").info("kept")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Stepping animation x" not in content
        assert "kept" in content
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
