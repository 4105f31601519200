import numpy as np
from typing import Any, Dict

from satbridge.cnf.document import CnfDocument

HISTOGRAM_BUCKETS = 10


def compute_cnf_stats(doc: CnfDocument) -> Dict[str, Any]:
    """
    Computes deterministic statistics about a problem's clauses.
    """
    n_clauses = len(doc.clauses)
    hist: Dict[Any, int] = {i: 0 for i in range(0, HISTOGRAM_BUCKETS + 1)}
    hist["overflow"] = 0

    if n_clauses == 0:
        return {
            "n_vars": doc.num_vars,
            "n_clauses": 0,
            "clause_len": {"min": 0, "mean": 0.0, "max": 0},
            "polarity_ratio": 0.5,
            "clause_size_histogram": hist
        }

    clause_lens = [len(c) for c in doc.clauses]
    total_lits = sum(clause_lens)
    pos_lits = sum(1 for clause in doc.clauses for lit in clause if lit > 0)

    for length in clause_lens:
        if length <= HISTOGRAM_BUCKETS:
            hist[length] += 1
        else:
            hist["overflow"] += 1

    return {
        "n_vars": doc.num_vars,
        "n_clauses": n_clauses,
        "clause_len": {
            "min": min(clause_lens),
            "mean": float(np.mean(clause_lens)),
            "max": max(clause_lens)
        },
        # fraction of positive literals
        "polarity_ratio": pos_lits / total_lits if total_lits > 0 else 0.5,
        "clause_size_histogram": hist
    }
