"""
Exception types raised by the optimization engine.

Every per-trial failure derives from :class:`TrialError`. These errors
propagate from the storage setters and ``Trial.suggest_uniform`` up to the
objective call site, where ``Study.optimize`` logs them and moves on.
"""


class TrialError(Exception):
    """Base class for failures tied to a single trial."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DistributionValidationError(TrialError, ValueError):
    """A distribution descriptor is missing a bound or has invalid bounds."""
    pass


class TrialNotFoundError(TrialError, LookupError):
    """A trial id is not known to the storage."""

    def __init__(self, trial_id: int):
        super().__init__(f"trial_id={trial_id} not found")
        self.trial_id = trial_id


class FinishedTrialUpdateError(TrialError):
    """A write was attempted on a trial that is already COMPLETE or FAILED."""

    def __init__(self, trial_id: int):
        super().__init__("cannot update finished trial")
        self.trial_id = trial_id


class InvalidTrialValueError(TrialError, ValueError):
    """An objective value is NaN or not a real number."""
    pass
