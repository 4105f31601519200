from satbridge.cnf.variables import Variable, VariableRegistry
from satbridge.cnf.clause import Clause
from satbridge.cnf.encodings import equivalence, exactly_one, at_most_one, at_least_one
from satbridge.cnf.dimacs import format_header, iter_dimacs_lines, to_dimacs, write_dimacs
from satbridge.cnf.document import CnfDocument
from satbridge.cnf.stats import compute_cnf_stats

__all__ = [
    "Variable", "VariableRegistry", "Clause",
    "equivalence", "exactly_one", "at_most_one", "at_least_one",
    "format_header", "iter_dimacs_lines", "to_dimacs", "write_dimacs",
    "CnfDocument",
    "compute_cnf_stats"
]
