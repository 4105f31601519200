"""
Core module for satbridge.
Provides error handling, logging and configuration.
"""
from satbridge.core.errors import (
    SatBridgeError, ConfigurationError, SolveError, ProcessLaunchError,
    SolverTimeoutError, ProtocolError, UnknownVariableError, ResultNotAvailableError
)
from satbridge.core.logging import get_logger, solver_logger
from satbridge.core.config import SolverConfig, parse_properties

__all__ = [
    "SatBridgeError", "ConfigurationError", "SolveError", "ProcessLaunchError",
    "SolverTimeoutError", "ProtocolError", "UnknownVariableError", "ResultNotAvailableError",
    "get_logger", "solver_logger",
    "SolverConfig", "parse_properties"
]
