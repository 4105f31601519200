"""
Parsing of the solver reply.

The reply is a verdict line (SAT or UNSAT) followed, for SAT only, by one
line of signed variable ids terminated by a 0 token.
"""
import re
from typing import List, Optional, Tuple

from satbridge.core.errors import ProtocolError

SAT = "SAT"
UNSAT = "UNSAT"

_LITERAL = re.compile(r"(-?)(\d+)")


def parse_verdict(line: Optional[str]) -> bool:
    """Returns True for SAT and False for UNSAT."""
    if line is None:
        raise ProtocolError("Solver closed its output before sending a verdict")
    verdict = line.strip()
    if verdict == SAT:
        return True
    if verdict == UNSAT:
        return False
    raise ProtocolError(f"Unexpected verdict line: {verdict!r}")


def parse_assignment(line: Optional[str]) -> List[Tuple[int, bool]]:
    """
    Parses an assignment line into (id, value) pairs in reply order.
    Anything after the terminating 0 is ignored.
    """
    if line is None:
        raise ProtocolError("Solver reported SAT but sent no assignment line")

    assignment = []
    for token in line.split():
        if token == "0":
            return assignment
        m = _LITERAL.fullmatch(token)
        if not m:
            raise ProtocolError(f"Malformed literal in assignment: {token!r}")
        assignment.append((int(m.group(2)), m.group(1) != "-"))

    raise ProtocolError("Assignment line ended without the terminating 0")
