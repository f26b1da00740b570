from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StudyConfig:
    """
    Settings for a :class:`~minihpo.study.Study`.

    Attributes:
        seed: Seed for the default sampler. ``None`` draws from OS entropy.
        mark_failed_trials: If True, a trial whose objective or bookkeeping
            fails is moved to FAILED. By default it is left as it was when
            the failure happened (usually RUNNING).
        verbose: Log one INFO line per completed trial.
        log_level: Level applied to the package logger when the study is built.
            ``None`` leaves the current level alone, including one set with
            :func:`~minihpo.logging_utils.set_verbosity`.
    """
    seed: Optional[int] = None
    mark_failed_trials: bool = False
    verbose: bool = True
    log_level: Optional[str] = None

    def __post_init__(self):
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, int):
                raise TypeError(f"seed must be an int or None, got {type(self.seed).__name__}")
            if not 0 <= self.seed < 2 ** 64:
                raise ValueError(f"seed must be in [0, 2**64), got {self.seed}")
        if self.log_level is not None:
            self.log_level = str(self.log_level).upper()
            if self.log_level not in _LOG_LEVELS:
                raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def log_level_value(self) -> Optional[int]:
        if self.log_level is None:
            return None
        return getattr(logging, self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StudyConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)
