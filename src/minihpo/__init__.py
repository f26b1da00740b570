# minihpo/__init__.py

__version__ = "0.1.0"

from .configuration import StudyConfig
from .distributions import UniformDistribution
from .exceptions import (
    DistributionValidationError,
    FinishedTrialUpdateError,
    InvalidTrialValueError,
    TrialError,
    TrialNotFoundError,
)
from .logging_utils import set_verbosity
from .samplers import BaseSampler, RandomSampler
from .storages import BaseStorage, InMemoryStorage
from .study import Study, create_study
from .trial import FrozenTrial, Trial, TrialState

__all__ = [
    "StudyConfig",
    "UniformDistribution",
    "TrialError",
    "DistributionValidationError",
    "TrialNotFoundError",
    "FinishedTrialUpdateError",
    "InvalidTrialValueError",
    "set_verbosity",
    "BaseSampler",
    "RandomSampler",
    "BaseStorage",
    "InMemoryStorage",
    "Study",
    "create_study",
    "FrozenTrial",
    "Trial",
    "TrialState",
]
