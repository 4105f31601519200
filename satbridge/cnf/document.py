from typing import Iterable, List

from pydantic import BaseModel, Field, field_validator
from pysat.formula import CNF

from satbridge.cnf.clause import Clause


class CnfDocument(BaseModel):
    """Plain integer view of a problem, validated against its variable count."""
    num_vars: int = Field(ge=0)
    clauses: List[List[int]]

    @field_validator('clauses')
    @classmethod
    def validate_clauses(cls, v: List[List[int]], info) -> List[List[int]]:
        # Empty clauses are legal DIMACS (they are simply false)
        num_vars = info.data.get('num_vars')
        for i, clause in enumerate(v):
            for lit in clause:
                if lit == 0:
                    raise ValueError(f"Literal 0 is invalid in clause {i}")
                if num_vars is not None and abs(lit) > num_vars:
                    raise ValueError(f"Literal {lit} exceeds num_vars {num_vars} in clause {i}")
        return v

    @classmethod
    def from_clauses(cls, num_vars: int, clauses: Iterable[Clause]) -> 'CnfDocument':
        return cls(num_vars=num_vars, clauses=[c.literals() for c in clauses])

    def to_dimacs(self) -> str:
        lines = [f"p cnf {self.num_vars} {len(self.clauses)}"]
        lines.extend(" ".join(map(str, c + [0])) for c in self.clauses)
        return "\n".join(lines) + "\n"

    def to_pysat(self) -> CNF:
        """Converts to a PySAT CNF formula."""
        formula = CNF()
        formula.nv = self.num_vars
        formula.clauses = [list(c) for c in self.clauses]
        return formula
