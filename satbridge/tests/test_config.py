import pytest

from satbridge.core.config import SolverConfig, parse_properties
from satbridge.core.errors import ConfigurationError


def test_defaults():
    config = SolverConfig()
    assert config.executable == "minisat"
    assert config.verbose is False
    assert config.timeout is None
    assert config.command() == ["minisat", "/dev/stdin", "/dev/stdout"]


def test_from_properties():
    config = SolverConfig.from_properties({
        "solver.executable": "/opt/minisat/bin/minisat",
        "verbose": "TRUE",
        "solver.timeout": "2.5",
        "unrelated": "ignored"
    })
    assert config.executable == "/opt/minisat/bin/minisat"
    assert config.verbose is True
    assert config.timeout == 2.5


def test_verbose_only_true_counts():
    assert SolverConfig.from_properties({"verbose": "yes"}).verbose is False
    assert SolverConfig.from_properties({}).verbose is False


def test_arguments_override():
    config = SolverConfig.from_properties({"solver.arguments": "-verb=0 /dev/stdin  /dev/stdout"})
    assert config.arguments == ["-verb=0", "/dev/stdin", "/dev/stdout"]
    assert SolverConfig.from_properties({"solver.arguments": ""}).arguments == []


def test_invalid_values():
    with pytest.raises(ConfigurationError):
        SolverConfig.from_properties({"solver.timeout": "soon"})
    with pytest.raises(ConfigurationError):
        SolverConfig.from_properties({"solver.timeout": "-1"})
    with pytest.raises(ConfigurationError):
        SolverConfig.from_properties({"solver.executable": "  "})


def test_parse_properties():
    text = """
    # solver settings
    ! another comment
    solver.executable = glucose
    verbose: true
    solver.timeout 10
    empty=
    """
    assert parse_properties(text) == {
        "solver.executable": "glucose",
        "verbose": "true",
        "solver.timeout": "10",
        "empty": ""
    }


def test_from_file(tmp_path):
    path = tmp_path / "solver.cfg"
    path.write_text("solver.executable=cadical\nverbose=false\n")
    config = SolverConfig.from_file(path)
    assert config.executable == "cadical"
    assert config.verbose is False


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="config file not found"):
        SolverConfig.from_file(tmp_path / "nope.cfg")


def test_from_env_or_file(tmp_path, monkeypatch):
    monkeypatch.delenv("SATBRIDGE_SOLVER", raising=False)
    monkeypatch.delenv("SATBRIDGE_CONFIG_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    assert SolverConfig.from_env_or_file() == SolverConfig()

    path = tmp_path / "solver.cfg"
    path.write_text("solver.executable=kissat\n")
    monkeypatch.setenv("SATBRIDGE_CONFIG_PATH", str(path))
    assert SolverConfig.from_env_or_file().executable == "kissat"

    monkeypatch.setenv("SATBRIDGE_SOLVER", "lingeling")
    assert SolverConfig.from_env_or_file().executable == "lingeling"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_env_solver(monkeypatch, value):
    monkeypatch.setenv("SATBRIDGE_SOLVER", value)
    with pytest.raises(ConfigurationError, match="must not be empty"):
        SolverConfig.from_env_or_file()


def test_solver_cfg_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("SATBRIDGE_SOLVER", raising=False)
    monkeypatch.delenv("SATBRIDGE_CONFIG_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "solver.cfg").write_text("solver.executable=cadical\nsolver.timeout=5\n")

    config = SolverConfig.from_env_or_file()
    assert config.executable == "cadical"
    assert config.timeout == 5.0

    # an explicit path wins over the working directory
    other = tmp_path / "other.cfg"
    other.write_text("solver.executable=kissat\n")
    monkeypatch.setenv("SATBRIDGE_CONFIG_PATH", str(other))
    assert SolverConfig.from_env_or_file().executable == "kissat"
