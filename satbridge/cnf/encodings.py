"""
Clause generators for higher level constraints.

Clause counts and orders are fixed:
  equivalence(left, right)  -> len(right) + 1 clauses
  exactly_one(*vs)          -> n * (n - 1) / 2 + 1 clauses
"""
from typing import List, Sequence

from satbridge.cnf.clause import Clause
from satbridge.cnf.variables import Variable


def equivalence(left: Variable, right: Sequence[Variable]) -> List[Clause]:
    """
    Encodes left <-> (right[0] | ... | right[n-1]).

    Clause 0 is (right[0] | ... | right[n-1] | -left), i.e. left -> OR(right).
    Clause i is (-right[i-1] | left) for i in 1..n, i.e. OR(right) -> left.
    With an empty right side only (-left) remains.
    """
    first = Clause(*right)
    first.append(left.negate())

    clauses = [first]
    for var in right:
        clauses.append(Clause(var.negate(), left))
    return clauses


def at_most_one(*variables: Variable) -> List[Clause]:
    """Pairwise exclusion (-vi | -vj) for all i < j, outer index first."""
    clauses = []
    for i in range(len(variables) - 1):
        first = variables[i]
        for second in variables[i + 1:]:
            clauses.append(Clause(first.negate(), second.negate()))
    return clauses


def at_least_one(*variables: Variable) -> Clause:
    return Clause(*variables)


def exactly_one(*variables: Variable) -> List[Clause]:
    """
    Exactly one of the variables is true.
    For no variables the single at-least-one clause is empty, so the result
    is unsatisfiable.
    """
    clauses = at_most_one(*variables)
    clauses.append(at_least_one(*variables))
    return clauses
