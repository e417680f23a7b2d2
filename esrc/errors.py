class ConfigError(ValueError):
    """
    Raised for inconsistent inputs or options, always before any
    per-sample work is started.
    """


class SolverError(RuntimeError):
    """
    Raised when a sparse coding solver receives non-finite data or
    fails to reach its tolerance.
    """
