import logging

import pytest

from poemfill.logging_config import setup_logging
from poemfill.settings import GameConfig


@pytest.fixture
def package_logger():
    logger = logging.getLogger("poemfill")
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


def test_level_comes_from_config(package_logger):
    setup_logging(GameConfig(log_level=logging.DEBUG))
    assert package_logger.level == logging.DEBUG


def test_rerun_swaps_handlers_instead_of_stacking(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1


def test_foreign_handlers_survive_rerun(package_logger):
    other = logging.NullHandler()
    package_logger.addHandler(other)
    setup_logging()
    setup_logging()
    assert other in package_logger.handlers
    assert len(package_logger.handlers) == 2


def test_log_file_sink(package_logger, tmp_path):
    cfg = GameConfig.from_env({"POEMFILL_LOG_DIR": str(tmp_path / "logs")})
    assert cfg.log_file == tmp_path / "logs" / "poemfill.log"
    setup_logging(cfg)
    logging.getLogger("poemfill.session").info("Round solved")
    for h in package_logger.handlers:
        h.flush()
    text = cfg.log_file.read_text(encoding="utf-8")
    assert "INFO" in text
    assert "[poemfill.session] Round solved" in text
