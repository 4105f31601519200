import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from satbridge.core.errors import ConfigurationError

DEFAULT_PROPERTIES_FILE = "solver.cfg"
DEFAULT_EXECUTABLE = "minisat"
# minisat takes an input and an output file; point both at the piped streams
DEFAULT_ARGUMENTS = ["/dev/stdin", "/dev/stdout"]


class SolverConfig(BaseModel):
    """Configuration for the external solver process."""
    executable: str = DEFAULT_EXECUTABLE
    arguments: List[str] = Field(default_factory=lambda: list(DEFAULT_ARGUMENTS))
    verbose: bool = False
    timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator('executable')
    @classmethod
    def check_executable(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("solver executable must not be empty")
        return v

    def command(self) -> List[str]:
        """The argv used to launch the solver."""
        return [self.executable, *self.arguments]

    @classmethod
    def from_properties(cls, props: Mapping[str, str]) -> 'SolverConfig':
        """
        Builds a config from a properties map.
        Recognized keys: solver.executable, solver.arguments, solver.timeout, verbose.
        """
        values: Dict[str, object] = {}
        if "solver.executable" in props:
            values["executable"] = props["solver.executable"].strip()
        if "solver.arguments" in props:
            values["arguments"] = props["solver.arguments"].split()
        if "solver.timeout" in props and props["solver.timeout"].strip():
            try:
                values["timeout"] = float(props["solver.timeout"])
            except ValueError:
                raise ConfigurationError(f"invalid solver.timeout: {props['solver.timeout']!r}")
        # Same reading as Boolean.parseBoolean: only "true" counts
        values["verbose"] = props.get("verbose", "false").strip().lower() == "true"

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"invalid solver configuration: {e}")

    @classmethod
    def from_file(cls, path: Union[str, Path] = DEFAULT_PROPERTIES_FILE) -> 'SolverConfig':
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"config file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"error reading config file {path}: {e}")
        return cls.from_properties(parse_properties(text))

    @classmethod
    def from_env_or_file(cls) -> 'SolverConfig':
        # 1. Executable straight from the environment
        env_solver = os.environ.get("SATBRIDGE_SOLVER")
        if env_solver is not None:
            return cls.from_properties({"solver.executable": env_solver})

        # 2. Properties file named by the environment
        config_path = os.environ.get("SATBRIDGE_CONFIG_PATH")
        if config_path:
            return cls.from_file(config_path)

        # 3. solver.cfg in the working directory
        if Path(DEFAULT_PROPERTIES_FILE).is_file():
            return cls.from_file(DEFAULT_PROPERTIES_FILE)

        # Default
        return cls()


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parses properties text in the usual key=value form.
    Also accepts 'key: value' and 'key value'. Lines starting with # or ! are comments.
    """
    props: Dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in "#!":
            continue

        cut = len(line)
        for i, ch in enumerate(line):
            if ch in "=:" or ch.isspace():
                cut = i
                break
        key = line[:cut]
        rest = line[cut:].lstrip()
        if rest[:1] in ("=", ":"):
            rest = rest[1:].lstrip()
        props[key] = rest
    return props
