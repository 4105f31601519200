"""
satbridge: build CNF problems from Python objects and solve them with an
external DIMACS solver such as minisat.
"""
from satbridge.cnf import (
    Variable, VariableRegistry, Clause,
    equivalence, exactly_one, at_most_one, at_least_one,
    CnfDocument
)
from satbridge.core import (
    SatBridgeError, ConfigurationError, SolveError, ProcessLaunchError,
    SolverTimeoutError, ProtocolError, UnknownVariableError, ResultNotAvailableError,
    SolverConfig
)
from satbridge.solver import Solver, SolverResult

__all__ = [
    "Variable", "VariableRegistry", "Clause",
    "equivalence", "exactly_one", "at_most_one", "at_least_one",
    "CnfDocument",
    "SatBridgeError", "ConfigurationError", "SolveError", "ProcessLaunchError",
    "SolverTimeoutError", "ProtocolError", "UnknownVariableError", "ResultNotAvailableError",
    "SolverConfig",
    "Solver", "SolverResult"
]
