from typing import List, Optional, Tuple

from satbridge.cnf.variables import VariableRegistry
from satbridge.core.errors import ProtocolError
from satbridge.solver.reply import parse_assignment


class SolverResult:
    """
    Outcome of one solver run: the verdict and the solver's diagnostic lines.

    Parsing the assignment line records every value in the registry, which is
    how Variable.result becomes available to the caller.
    """
    def __init__(self,
                 satisfiable: bool,
                 registry: VariableRegistry,
                 duration: float = 0.0,
                 returncode: Optional[int] = None):
        self._satisfiable = satisfiable
        self._registry = registry
        self._statistics: List[str] = []
        self._duration = duration
        self._returncode = returncode

    @property
    def satisfiable(self) -> bool:
        return self._satisfiable

    @property
    def statistics(self) -> Tuple[str, ...]:
        """Raw diagnostic lines in the order the solver wrote them."""
        return tuple(self._statistics)

    @property
    def duration(self) -> float:
        """Seconds between launching the solver and its exit."""
        return self._duration

    @property
    def returncode(self) -> Optional[int]:
        return self._returncode

    def _add_statistics_line(self, line: str) -> None:
        self._statistics.append(line)

    def _add_assignment(self, line: Optional[str]) -> None:
        if not self._satisfiable:
            raise ProtocolError("Assignment received for an unsatisfiable result")
        assignment = parse_assignment(line)
        # Nothing is recorded unless every id in the reply is known
        for var_id, _ in assignment:
            self._registry.get(var_id)
        for var_id, value in assignment:
            self._registry.record_result(var_id, value)

    def __str__(self) -> str:
        # For humans only; use .statistics for a stable format
        return "".join(line + "\n" for line in self._statistics)

    def __repr__(self) -> str:
        return f"SolverResult(satisfiable={self._satisfiable}, statistics={len(self._statistics)} lines)"
