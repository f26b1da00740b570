import copy
import dataclasses
import logging
import math
import numbers
from typing import List, Optional

from ..exceptions import FinishedTrialUpdateError, InvalidTrialValueError
from ..trial import FrozenTrial, TrialState
from .base import BaseStorage

logger = logging.getLogger(__name__)


class InMemoryStorage(BaseStorage):
    """
    A storage backend that keeps every trial in a Python list.

    Nothing is persisted; the trials live as long as the storage object.
    Stored records are immutable ``FrozenTrial`` instances and every update
    replaces the record at its index.
    """
    def __init__(self):
        self._trials: List[FrozenTrial] = []

    def _get_updatable(self, trial_id: int) -> Optional[FrozenTrial]:
        """Returns the stored trial, None for unknown ids, or raises if it is finished."""
        if not 0 <= trial_id < len(self._trials):
            logger.debug("Ignoring update for unknown trial_id=%s", trial_id)
            return None
        trial = self._trials[trial_id]
        if trial.is_finished():
            raise FinishedTrialUpdateError(trial_id)
        return trial

    def create_new_trial(self) -> int:
        trial_id = len(self._trials)
        self._trials.append(FrozenTrial(trial_id=trial_id))
        return trial_id

    def get_trial(self, trial_id: int) -> Optional[FrozenTrial]:
        if not 0 <= trial_id < len(self._trials):
            return None
        return copy.deepcopy(self._trials[trial_id])

    def get_all_trials(self) -> List[FrozenTrial]:
        return copy.deepcopy(self._trials)

    def get_best_trial(self) -> Optional[FrozenTrial]:
        best: Optional[FrozenTrial] = None
        for trial in self._trials:
            if trial.state != TrialState.COMPLETE or trial.value is None:
                continue
            if best is None or trial.value < best.value:
                best = trial
        return copy.deepcopy(best)

    def set_trial_value(self, trial_id: int, value: float) -> None:
        trial = self._get_updatable(trial_id)
        if trial is None:
            return
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidTrialValueError(
                f"trial value must be a real number, got {type(value).__name__}")
        value = float(value)
        if math.isnan(value):
            raise InvalidTrialValueError("trial value must not be NaN")
        self._trials[trial_id] = dataclasses.replace(trial, value=value)

    def set_trial_state(self, trial_id: int, state: TrialState) -> None:
        trial = self._get_updatable(trial_id)
        if trial is not None:
            self._trials[trial_id] = dataclasses.replace(trial, state=TrialState(state))

    def set_trial_param(self, trial_id: int, name: str, value: float) -> None:
        trial = self._get_updatable(trial_id)
        if trial is not None:
            params = dict(trial.params)
            params[name] = value
            self._trials[trial_id] = dataclasses.replace(trial, params=params)

    @property
    def n_trials(self) -> int:
        return len(self._trials)
