import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from satbridge.cnf.clause import Clause
from satbridge.cnf.encodings import equivalence, exactly_one
from satbridge.core.config import SolverConfig
from satbridge.core.errors import ConfigurationError, ResultNotAvailableError, SatBridgeError
from satbridge.solver.bridge import Solver

DEMO_VAR_COUNT = 5


def load_config(args) -> SolverConfig:
    if args.config:
        config = SolverConfig.from_file(Path(args.config))
    else:
        config = SolverConfig.from_env_or_file()
    updates = {}
    if args.executable:
        updates["executable"] = args.executable
    if args.verbose:
        updates["verbose"] = True
    if args.timeout is not None:
        updates["timeout"] = args.timeout
    if not updates:
        return config
    try:
        return SolverConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigurationError(f"invalid solver configuration: {e}")


def build_demo(solver: Solver):
    """
    left <-> (v0 | ... | v4), exactly one of v0..v4, and not left.
    Unsatisfiable by construction.
    """
    left = solver.new_variable()
    variables = [solver.new_variable() for _ in range(DEMO_VAR_COUNT)]

    solver.add_clauses(equivalence(left, variables))
    solver.add_clauses(exactly_one(*variables))
    solver.add_clause(Clause(left.negate()))
    return left, variables


def handle_demo(args):
    solver = Solver(load_config(args))
    left, variables = build_demo(solver)

    if args.dimacs_only:
        for line in solver.dimacs_lines():
            print(line)
        return

    result = solver.solve()
    print(f"satisfiable: {result.satisfiable}")

    def show(var):
        try:
            return str(var.result)
        except ResultNotAvailableError:
            return "n/a"

    print(f"left  : {show(left)}")
    for i, var in enumerate(variables):
        print(f"var #{i}: {show(var)}")

    if args.stats:
        print(result, end="")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="satbridge: CNF builder and external SAT solver bridge")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_demo = subparsers.add_parser("demo", help="Build and solve the equivalence/exactly-one demo problem")
    p_demo.add_argument("--config", help="Path to a solver.cfg properties file")
    p_demo.add_argument("--executable", help="Solver executable (overrides config)")
    p_demo.add_argument("--timeout", type=float, help="Seconds to wait for the solver")
    p_demo.add_argument("--verbose", action="store_true", help="Echo the DIMACS sent to the solver")
    p_demo.add_argument("--stats", action="store_true", help="Print the solver's diagnostic lines")
    p_demo.add_argument("--dimacs-only", action="store_true", help="Print the problem without solving")
    p_demo.set_defaults(func=handle_demo)

    args = parser.parse_args(argv)

    try:
        args.func(args)
    except SatBridgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
