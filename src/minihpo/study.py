"""
The central user-facing API for running optimization studies.
"""
from __future__ import annotations

import logging
import numbers
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

from .configuration import StudyConfig
from .exceptions import InvalidTrialValueError
from .logging_utils import get_root_logger
from .samplers import BaseSampler, RandomSampler
from .storages import BaseStorage, InMemoryStorage
from .trial import FrozenTrial, Trial, TrialState

logger = logging.getLogger(__name__)

ObjectiveFuncType = Callable[[Trial], float]


class Study:
    """
    Runs the optimization loop and exposes its results.

    The study owns one storage and one sampler for its whole lifetime. Every
    trial it creates holds a reference to the study and therefore uses the
    same storage and the same sampler state. Lower objective values are better.

    Args:
        storage: Where trials are recorded.
        sampler: Produces parameter values for ``Trial.suggest_uniform``.
        config: Study settings. Defaults to ``StudyConfig()``.
    """
    def __init__(self,
                 storage: BaseStorage,
                 sampler: BaseSampler,
                 config: Optional[StudyConfig] = None):
        self.storage = storage
        self.sampler = sampler
        self.config = config if config is not None else StudyConfig()
        root_logger = get_root_logger()
        if self.config.log_level is not None:
            root_logger.setLevel(self.config.log_level_value)

    def optimize(self, objective: ObjectiveFuncType, n_trials: int) -> None:
        """
        Runs ``n_trials`` trials one after another.

        A failing trial never stops the loop: the error is logged with the
        trial id and the next trial starts.

        Args:
            objective: A callable that takes a :class:`Trial` and returns a
                number to be minimized.
            n_trials: The number of trials to run.
        """
        if n_trials < 0:
            raise ValueError(f"n_trials must be non-negative, got {n_trials}")

        best_id: Optional[int] = None
        best_value: Optional[float] = None
        if self.config.verbose and n_trials > 0:
            best = self.storage.get_best_trial()
            if best is not None:
                best_id, best_value = best.trial_id, best.value

        for _ in range(n_trials):
            trial_id = self.storage.create_new_trial()
            trial = Trial(self, trial_id)

            try:
                value = objective(trial)
                if isinstance(value, bool) or not isinstance(value, numbers.Real):
                    raise InvalidTrialValueError(
                        f"objective must return a real number, got {type(value).__name__}")
                self.storage.set_trial_value(trial_id, value)
                self.storage.set_trial_state(trial_id, TrialState.COMPLETE)
            except Exception as e:
                logger.warning("trial_id=%d is failed by %s", trial_id, e)
                if self.config.mark_failed_trials:
                    self._mark_failed(trial_id)
                continue

            if not self.config.verbose:
                continue
            value = float(value)
            if best_value is None or value < best_value:
                best_id, best_value = trial_id, value
            if logger.isEnabledFor(logging.INFO):
                logger.info("Trial %d finished with value: %s. Best is trial %d with value: %s.",
                            trial_id, value, best_id, best_value)

    def _mark_failed(self, trial_id: int) -> None:
        frozen = self.storage.get_trial(trial_id)
        if frozen is not None and not frozen.is_finished():
            self.storage.set_trial_state(trial_id, TrialState.FAILED)

    @property
    def best_trial(self) -> Optional[FrozenTrial]:
        """The completed trial with the lowest value, or None."""
        return self.storage.get_best_trial()

    @property
    def best_value(self) -> float:
        best = self.best_trial
        if best is None:
            raise ValueError("No trials are completed yet.")
        return best.value

    @property
    def best_params(self) -> Dict[str, float]:
        best = self.best_trial
        if best is None:
            raise ValueError("No trials are completed yet.")
        return best.params

    @property
    def trials(self) -> List[FrozenTrial]:
        """Snapshots of all trials, in creation order."""
        return self.storage.get_all_trials()

    def get_trials_dataframe(self) -> pd.DataFrame:
        """Returns the trial results as a pandas DataFrame."""
        trials = self.trials
        if not trials:
            return pd.DataFrame(columns=['trial_id', 'state', 'value'])

        rows: List[Dict[str, Any]] = [t.to_dict() for t in trials]
        return pd.DataFrame(rows)


def create_study(storage: Optional[BaseStorage] = None,
                 sampler: Optional[BaseSampler] = None,
                 config: Optional[StudyConfig] = None) -> Study:
    """
    Builds a study, filling in an in-memory storage and a random sampler.

    Args:
        storage: A storage backend. Defaults to :class:`InMemoryStorage`.
        sampler: A sampler. Defaults to a :class:`RandomSampler` seeded with
            ``config.seed``.
        config: Study settings.
    """
    config = config if config is not None else StudyConfig()
    if storage is None:
        storage = InMemoryStorage()
    if sampler is None:
        sampler = RandomSampler(seed=config.seed)
    return Study(storage=storage, sampler=sampler, config=config)
