from satbridge.solver.reply import parse_verdict, parse_assignment, SAT, UNSAT
from satbridge.solver.result import SolverResult
from satbridge.solver.bridge import Solver

__all__ = [
    "parse_verdict", "parse_assignment", "SAT", "UNSAT",
    "SolverResult",
    "Solver"
]
