import logging
from pathlib import Path

from uilocator.logs import LOGGER_NAME, build_logger


def test_build_logger_attaches_file_handler_once(tmp_path: Path) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    try:
        built = build_logger(tmp_path)
        again = build_logger(tmp_path)
        assert built is again
        assert len(built.handlers) == 1
        assert isinstance(built.handlers[0], logging.FileHandler)
        assert built.handlers[0].formatter._fmt == "%(asctime)s %(levelname)s %(message)s"

        logging.getLogger("uilocator.resolve").info("resolved id=a")
        built.handlers[0].flush()
        assert "resolved id=a" in (tmp_path / "uilocator.log").read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved
        logger.propagate = True
