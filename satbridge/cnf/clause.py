from typing import Iterable, Iterator, List, Mapping, Tuple

from satbridge.cnf.variables import Variable


class Clause:
    """
    A disjunction of possibly negated variables.

    render() joins the literals with spaces and appends the DIMACS terminator
    "0". That text is a stable format and may be relied upon.
    """
    def __init__(self, *variables: Variable):
        self._variables: List[Variable] = list(variables)

    def append(self, var: Variable) -> None:
        self._variables.append(var)

    def extend(self, variables: Iterable[Variable]) -> None:
        self._variables.extend(variables)

    @property
    def variables(self) -> Tuple[Variable, ...]:
        return tuple(self._variables)

    def literals(self) -> List[int]:
        return [v.literal for v in self._variables]

    def render(self) -> str:
        parts = [str(v) for v in self._variables]
        parts.append("0")
        return " ".join(parts)

    def is_satisfied_by(self, assignment: Mapping[int, bool]) -> bool:
        """Evaluates the clause under an id -> bool assignment. The empty clause is false."""
        return any(assignment[v.id] != v.negated for v in self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._variables)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Clause({self.render()!r})"
