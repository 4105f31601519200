import os
import tempfile
from pathlib import Path
from typing import Iterable, Iterator, Union

from satbridge.cnf.clause import Clause


def format_header(var_count: int, clause_count: int) -> str:
    return f"p cnf {var_count} {clause_count}"


def iter_dimacs_lines(var_count: int, clauses: Iterable[Clause]) -> Iterator[str]:
    """Yields the header followed by one line per clause, without line breaks."""
    clauses = list(clauses)
    yield format_header(var_count, len(clauses))
    for clause in clauses:
        yield clause.render()


def to_dimacs(var_count: int, clauses: Iterable[Clause]) -> str:
    return "".join(line + "\n" for line in iter_dimacs_lines(var_count, clauses))


def write_dimacs(path: Union[str, Path], var_count: int, clauses: Iterable[Clause]) -> None:
    """Writes the problem to path atomically using a temporary file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = to_dimacs(var_count, clauses)

    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f"{path.name}.tmp")
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        os.replace(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise
