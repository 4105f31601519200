import sys
import textwrap

import pytest

from satbridge.cnf.variables import VariableRegistry
from satbridge.core.config import SolverConfig

FAKE_SOLVER = textwrap.dedent("""
    import pathlib
    import sys
    import time

    sys.stderr.write({stderr_first!r})
    sys.stderr.flush()
    data = sys.stdin.read()
    pathlib.Path({received!r}).write_text(data)
    sys.stdout.write({stdout!r})
    sys.stdout.flush()
    sys.stderr.write({stderr!r})
    sys.stderr.flush()
    sys.stderr.buffer.write({stderr_raw!r})
    sys.stderr.buffer.flush()
    time.sleep({delay!r})
    sys.exit({code!r})
""")


class FakeSolver:
    """A python script standing in for minisat. Replies with canned output."""
    def __init__(self, tmp_path):
        self.tmp_path = tmp_path
        self.received_path = tmp_path / "received.cnf"
        self._count = 0

    def config(self, stdout="", stderr="", stderr_first="", stderr_raw=b"", delay=0.0, code=0, **kwargs) -> SolverConfig:
        self._count += 1
        script = self.tmp_path / f"fake_solver_{self._count}.py"
        script.write_text(FAKE_SOLVER.format(
            stdout=stdout,
            stderr=stderr,
            stderr_first=stderr_first,
            stderr_raw=stderr_raw,
            received=str(self.received_path),
            delay=delay,
            code=code
        ))
        kwargs.setdefault("timeout", 30)
        return SolverConfig(executable=sys.executable, arguments=[str(script)], **kwargs)

    @property
    def received(self) -> str:
        return self.received_path.read_text()


@pytest.fixture
def fake_solver(tmp_path):
    return FakeSolver(tmp_path)


@pytest.fixture
def registry():
    return VariableRegistry()
