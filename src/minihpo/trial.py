from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from .exceptions import TrialNotFoundError

if TYPE_CHECKING:
    from .study import Study


class TrialState(Enum):
    """
    Represents the state of a trial.

    A trial starts RUNNING and may move to COMPLETE or FAILED. Both of those
    are terminal.
    """
    RUNNING = "RUNNING"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"

    def is_finished(self) -> bool:
        return self != TrialState.RUNNING


@dataclass(frozen=True)
class FrozenTrial:
    """
    A read-only snapshot of one trial as recorded by the storage.

    Attributes:
        trial_id: Position of the trial in the study, starting at 0.
        state: The state of the trial at snapshot time.
        value: The objective value. Set only once the objective succeeded.
        params: Sampled parameter values by name.
    """
    trial_id: int
    state: TrialState = TrialState.RUNNING
    value: Optional[float] = None
    params: Dict[str, float] = field(default_factory=dict)

    def is_finished(self) -> bool:
        return self.state.is_finished()

    def to_dict(self) -> Dict[str, Any]:
        """Flattens the trial into a row, one ``params_<name>`` key per parameter."""
        row: Dict[str, Any] = {
            'trial_id': self.trial_id,
            'state': self.state.value,
            'value': self.value,
        }
        for name, value in self.params.items():
            row[f'params_{name}'] = value
        return row


class Trial:
    """
    The handle passed to the objective function.

    A trial is bound to one trial id and to the study that created it. It uses
    the study's storage and sampler directly, so successive trials draw from
    one advancing random sequence and write into one record set.

    Args:
        study: The owning study.
        trial_id: The id returned by ``storage.create_new_trial()``.
    """
    def __init__(self, study: "Study", trial_id: int):
        self.study = study
        self.trial_id = trial_id

    def suggest_uniform(self, name: str, low: float, high: float) -> float:
        """
        Suggests a value for a continuous parameter drawn from ``[low, high)``.

        Each call draws a fresh value, even if ``name`` was already suggested
        in this trial; the stored value is then overwritten.

        Args:
            name: The parameter name.
            low: The lower bound (inclusive).
            high: The upper bound (exclusive).

        Returns:
            The sampled value, also recorded as ``params[name]``.

        Raises:
            TrialNotFoundError: If the storage does not know this trial.
            DistributionValidationError: If the bounds are invalid.
            FinishedTrialUpdateError: If the trial has already finished.
        """
        storage = self.study.storage
        if storage.get_trial(self.trial_id) is None:
            raise TrialNotFoundError(self.trial_id)

        distribution = {"low": low, "high": high}
        param = self.study.sampler.sample_independent(distribution)
        storage.set_trial_param(self.trial_id, name, param)
        return param

    @property
    def params(self) -> Dict[str, float]:
        """Parameters suggested so far in this trial."""
        frozen = self.study.storage.get_trial(self.trial_id)
        if frozen is None:
            raise TrialNotFoundError(self.trial_id)
        return frozen.params

    def __repr__(self):
        return f"Trial(trial_id={self.trial_id})"
