import logging

from satbridge.core.logging import LOG_LEVEL_ENV, SolverLogAdapter, get_logger, solver_logger


def test_get_logger_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    logger = get_logger("satbridge.test.explicit", level="debug")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1

    # a second call reuses the handler
    get_logger("satbridge.test.explicit", level="WARNING")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_get_logger_env_and_fallback(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    assert get_logger("satbridge.test.env").level == logging.ERROR

    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert get_logger("satbridge.test.unknown").level == logging.INFO


def test_solver_logger_prefixes_executable():
    log = solver_logger(logging.getLogger("satbridge.test.adapter"), "/opt/minisat/bin/minisat")
    assert isinstance(log, SolverLogAdapter)
    assert log.process("solved", {}) == ("[minisat] solved", {})

    bare = solver_logger(logging.getLogger("satbridge.test.adapter"), "glucose")
    assert bare.process("x", {"stacklevel": 2}) == ("[glucose] x", {"stacklevel": 2})
