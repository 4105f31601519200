import threading
from typing import Dict, List, Optional

from satbridge.core.errors import ResultNotAvailableError, UnknownVariableError


class Variable:
    """
    A decision variable as used inside clauses.

    Every variable has one positive form registered in its VariableRegistry.
    Negated forms are lightweight views sharing the same id. Equality and
    hashing only look at the id, so a variable and its negation are the same
    key in result maps while still rendering differently in clause text.
    """
    __slots__ = ("_id", "_negated", "_registry")

    def __init__(self, var_id: int, negated: bool = False, registry: Optional['VariableRegistry'] = None):
        if var_id <= 0:
            raise ValueError(f"Variable id must be positive, got {var_id}")
        self._id = var_id
        self._negated = negated
        self._registry = registry

    @property
    def id(self) -> int:
        return self._id

    @property
    def negated(self) -> bool:
        return self._negated

    @property
    def registry(self) -> Optional['VariableRegistry']:
        return self._registry

    @property
    def literal(self) -> int:
        """Signed DIMACS literal, negative iff this is the negated form."""
        return -self._id if self._negated else self._id

    def negate(self) -> 'Variable':
        return Variable(self._id, not self._negated, self._registry)

    def __invert__(self) -> 'Variable':
        return self.negate()

    @property
    def result(self) -> bool:
        """
        Solver assignment of the positive form of this variable.
        Raises ResultNotAvailableError if the solver has not run or found no solution.
        """
        if self._registry is None:
            raise ResultNotAvailableError(f"Variable {self._id} is not attached to a registry")
        return self._registry.lookup_result(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return str(self.literal)

    def __repr__(self) -> str:
        return f"Variable({self.literal})"


class VariableRegistry:
    """
    Allocates variable ids and keeps the solver assignments.
    Ids are consecutive starting at 1, as DIMACS requires.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self._variables: Dict[int, Variable] = {}
        self._results: Dict[int, bool] = {}
        self._next_id: int = 1

    @property
    def variable_count(self) -> int:
        """Number of ids allocated so far (the last id, or 0)."""
        return self._next_id - 1

    def __len__(self) -> int:
        return self.variable_count

    def create_variable(self) -> Variable:
        with self._lock:
            var = Variable(self._next_id, False, self)
            self._variables[self._next_id] = var
            self._next_id += 1
        return var

    def create_variables(self, n: int) -> List[Variable]:
        """Allocates a block of n consecutive variables."""
        if n < 0:
            raise ValueError(f"Cannot create a negative number of variables: {n}")
        return [self.create_variable() for _ in range(n)]

    def get(self, var_id: int) -> Variable:
        """Returns the positive form registered for var_id."""
        try:
            return self._variables[var_id]
        except KeyError:
            raise UnknownVariableError(f"Variable {var_id} was never allocated")

    def negate(self, var: Variable) -> Variable:
        return var.negate()

    def record_result(self, var_id: int, value: bool) -> None:
        with self._lock:
            if var_id not in self._variables:
                raise UnknownVariableError(f"Solver assigned unknown variable {var_id}")
            self._results[var_id] = value

    def has_result(self, var: Variable) -> bool:
        return var.id in self._results

    def lookup_result(self, var: Variable) -> bool:
        """
        Value recorded for the positive form of var. The negated flag is not
        part of the key; callers holding a negated view invert it themselves.
        """
        try:
            return self._results[var.id]
        except KeyError:
            raise ResultNotAvailableError(
                f"No result for variable {var.id}: solver not yet run or yielded no solution"
            )

    def results(self) -> Dict[int, bool]:
        return dict(self._results)

    def clear_results(self) -> None:
        with self._lock:
            self._results.clear()

    def reset(self) -> None:
        """Forgets all variables and results and restarts numbering at 1."""
        with self._lock:
            self._variables.clear()
            self._results.clear()
            self._next_id = 1
