import io
import logging
import subprocess
import sys
import time
from typing import Iterable, List, Optional, TextIO, Tuple, Union
from pathlib import Path

from satbridge.cnf.clause import Clause
from satbridge.cnf.dimacs import iter_dimacs_lines, write_dimacs
from satbridge.cnf.document import CnfDocument
from satbridge.cnf.stats import compute_cnf_stats
from satbridge.cnf.variables import Variable, VariableRegistry
from satbridge.core.config import SolverConfig
from satbridge.core.errors import (
    ProcessLaunchError, ProtocolError, SolveError, SolverTimeoutError, UnknownVariableError
)
from satbridge.core.logging import get_logger, solver_logger
from satbridge.solver.reply import parse_verdict
from satbridge.solver.result import SolverResult

logger = get_logger(__name__)

# minisat exit codes: 10 satisfiable, 20 unsatisfiable
EXPECTED_RETURNCODES = (0, 10, 20)


class Solver:
    """
    Bridge to an external DIMACS solver.

    Clauses are collected with add_clause/add_clauses. solve() writes them as
    DIMACS CNF to the solver's stdin, reads the verdict and assignment from its
    stdout and the diagnostic lines from its stderr.
    """
    def __init__(self,
                 config: Optional[SolverConfig] = None,
                 registry: Optional[VariableRegistry] = None,
                 echo: Optional[TextIO] = None):
        self.config = config if config else SolverConfig.from_env_or_file()
        self.registry = registry if registry is not None else VariableRegistry()
        self.echo = echo
        self._clauses: List[Clause] = []

    def new_variable(self) -> Variable:
        return self.registry.create_variable()

    def add_clause(self, clause: Clause) -> None:
        self._clauses.append(clause)

    def add_clauses(self, clauses: Iterable[Clause]) -> None:
        self._clauses.extend(clauses)

    @property
    def clauses(self) -> Tuple[Clause, ...]:
        return tuple(self._clauses)

    @property
    def clause_count(self) -> int:
        return len(self._clauses)

    def dimacs_lines(self) -> List[str]:
        """Header and clause lines exactly as sent to the solver, without line breaks."""
        return list(iter_dimacs_lines(self.registry.variable_count, self._clauses))

    def check_clauses(self) -> None:
        """
        Raises UnknownVariableError if a clause uses a variable that this
        solver's registry did not allocate.
        """
        var_count = self.registry.variable_count
        for i, clause in enumerate(self._clauses):
            for var in clause:
                if var.registry is not None and var.registry is not self.registry:
                    raise UnknownVariableError(f"Clause {i} uses variable {var.id} from another registry")
                if var.id > var_count:
                    raise UnknownVariableError(
                        f"Clause {i} uses variable {var.id} but only {var_count} were allocated"
                    )

    def to_document(self) -> CnfDocument:
        self.check_clauses()
        return CnfDocument.from_clauses(self.registry.variable_count, self._clauses)

    def write_dimacs(self, path: Union[str, Path]) -> None:
        write_dimacs(path, self.registry.variable_count, self._clauses)

    def _serialize(self) -> str:
        out = self.echo if self.echo is not None else sys.stdout
        chunks = []
        for line in self.dimacs_lines():
            if self.config.verbose:
                print(line, file=out)
            chunks.append(line)
            chunks.append("\n")
        return "".join(chunks)

    def solve(self, timeout: Optional[float] = None) -> SolverResult:
        """
        Runs the external solver on the collected clauses.

        Raises UnknownVariableError if a clause uses a foreign variable,
        ProcessLaunchError if the solver cannot be started,
        SolverTimeoutError if it does not finish in time, SolveError on other
        I/O failures and ProtocolError if the reply is malformed.
        """
        if timeout is None:
            timeout = self.config.timeout

        self.check_clauses()
        payload = self._serialize()
        var_count = self.registry.variable_count
        clause_count = len(self._clauses)
        log = solver_logger(logger, self.config.executable)
        if logger.isEnabledFor(logging.DEBUG):
            log.debug(f"Problem stats: {compute_cnf_stats(self.to_document())}")

        # Results from an earlier run must not leak into this one
        self.registry.clear_results()

        command = self.config.command()
        start_time = time.time()
        try:
            # Diagnostics are free text; undecodable bytes must not abort the run
            proc = subprocess.Popen(
                command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="replace"
            )
        except OSError as e:
            raise ProcessLaunchError(f"Cannot start solver {command[0]!r}: {e}")

        log.info(f"calculating {var_count} variables and {clause_count} clauses")

        # communicate() feeds stdin and drains stdout/stderr concurrently, then closes stdin
        try:
            stdout, stderr = proc.communicate(payload, timeout=timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.communicate()
            raise SolverTimeoutError(f"Solver {command[0]!r} did not finish within {timeout} seconds")
        except OSError as e:
            proc.kill()
            proc.wait()
            raise SolveError(f"I/O error while talking to solver {command[0]!r}: {e}")

        duration = time.time() - start_time
        if proc.returncode not in EXPECTED_RETURNCODES:
            log.warning(f"exited with code {proc.returncode}")

        reply = io.StringIO(stdout)
        try:
            satisfiable = parse_verdict(_read_line(reply))
        except ProtocolError as e:
            tail = stderr.splitlines()[-3:]
            if tail:
                raise ProtocolError(f"{e} (solver stderr: {' | '.join(tail)})")
            raise
        result = SolverResult(satisfiable, self.registry, duration=duration, returncode=proc.returncode)
        if result.satisfiable:
            result._add_assignment(_read_line(reply))

        for line in stderr.splitlines():
            result._add_statistics_line(line)

        log.info(f"finished in {duration:.4f}s: {'SAT' if result.satisfiable else 'UNSAT'}")
        return result


def _read_line(stream: io.StringIO) -> Optional[str]:
    """One line without its line break, or None at end of stream."""
    line = stream.readline()
    if not line:
        return None
    return line.rstrip("\r\n")
