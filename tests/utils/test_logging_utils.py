import logging

import pytest

from mlflow_client.utils.logging_utils import (
    LOGGING_LINE_FORMAT,
    _configure_mlflow_loggers,
    disable_logging,
    enable_logging,
)


@pytest.fixture
def logger():
    return logging.getLogger("mlflow_client.tests")


@pytest.fixture(autouse=True)
def reset_stream():
    yield
    enable_logging()


def test_event_logs_go_to_current_stderr(logger, capsys):
    logger.info("Created experiment 'abc'")
    err = capsys.readouterr().err
    assert "INFO mlflow_client.tests: Created experiment 'abc'" in err


def test_debug_logs_hidden_by_default(logger, capsys):
    logger.debug("Sending GET request")
    assert "Sending GET request" not in capsys.readouterr().err


def test_disable_and_enable_logging(logger, capsys):
    disable_logging()
    logger.warning("silenced")
    assert "silenced" not in capsys.readouterr().err
    enable_logging()
    logger.warning("audible")
    assert "audible" in capsys.readouterr().err


def test_logging_level_from_env(monkeypatch):
    monkeypatch.setenv("MLFLOW_LOGGING_LEVEL", "debug")
    _configure_mlflow_loggers(root_module_name="mlflow_client_level_test")
    configured = logging.getLogger("mlflow_client_level_test")
    assert configured.level == logging.DEBUG
    assert not configured.propagate
    [handler] = configured.handlers
    assert handler.formatter._fmt == LOGGING_LINE_FORMAT
