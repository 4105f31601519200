class SatBridgeError(Exception):
    """Base exception for all satbridge related errors."""
    pass

class ConfigurationError(SatBridgeError):
    """Raised when the solver configuration is missing, unreadable or invalid."""
    pass

class SolveError(SatBridgeError):
    """Raised when talking to the external solver process fails."""
    pass

class ProcessLaunchError(SolveError):
    """Raised when the solver executable cannot be found or started."""
    pass

class SolverTimeoutError(SolveError):
    """Raised when the solver does not finish within the allowed time."""
    pass

class ProtocolError(SatBridgeError):
    """Raised when the solver reply does not follow the expected line grammar."""
    pass

class UnknownVariableError(SatBridgeError):
    """Raised when a solver reply names a variable id that was never allocated."""
    pass

class ResultNotAvailableError(SatBridgeError):
    """Raised when a variable is queried before a solution was recorded for it."""
    pass
