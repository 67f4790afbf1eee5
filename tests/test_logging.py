import logging

import pytest

from model_grid import ModelGrid
from model_grid.utils import PACKAGE_LOGGER, setup_logging

from conftest import RecordingTrainer


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_training_progress_goes_to_run_file(tmp_path):
    """Start/complete records of a training run land in the run's log file."""
    logger = setup_logging(log_dir=str(tmp_path), run_name="grid_run")
    grid = ModelGrid().add_model(name="M1", method="glm")

    grid.train(RecordingTrainer())
    for handler in logger.handlers:
        handler.flush()

    log_files = list(tmp_path.glob("grid_run_*.log"))
    assert len(log_files) == 1
    text = log_files[0].read_text()
    assert "Training of 'M1' started." in text
    assert "Training of 'M1' completed." in text


def test_debug_level_shows_consolidated_configuration(tmp_path):
    logger = setup_logging(log_level="debug", log_dir=str(tmp_path))
    ModelGrid().add_model(name="M1", method="glm").train(RecordingTrainer())
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert "Configuration of 'M1'" in next(tmp_path.glob("grid_*.log")).read_text()


def test_root_logger_is_left_alone():
    root = logging.getLogger()
    root_handlers = list(root.handlers)

    logger = setup_logging(log_level="WARNING")

    assert logger is logging.getLogger(PACKAGE_LOGGER)
    assert root.handlers == root_handlers
    assert not logger.propagate


def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logging(log_dir=str(tmp_path / "first"))
    logger = setup_logging(log_dir=str(tmp_path / "second"))

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert "second" in file_handlers[0].baseFilename
