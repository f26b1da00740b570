from abc import ABC, abstractmethod
from typing import List, Optional

from ..trial import FrozenTrial, TrialState


class BaseStorage(ABC):
    """
    Abstract base class for storage backends.

    A storage owns the authoritative, append-only sequence of trials. Trial
    ids equal their position in that sequence. The setters refuse to touch a
    trial that has already finished and silently ignore unknown ids.
    """

    @abstractmethod
    def create_new_trial(self) -> int:
        """
        Appends a new RUNNING trial with no value and no parameters.

        Returns:
            The id of the new trial (0 for the first one, then 1, 2, ...).
        """
        pass

    @abstractmethod
    def get_trial(self, trial_id: int) -> Optional[FrozenTrial]:
        """
        Retrieves a snapshot of a trial.

        Args:
            trial_id: The ID of the trial.

        Returns:
            A copy of the trial if found, otherwise None.
        """
        pass

    @abstractmethod
    def get_all_trials(self) -> List[FrozenTrial]:
        """
        Retrieves snapshots of every trial, ordered by trial id.
        """
        pass

    @abstractmethod
    def set_trial_value(self, trial_id: int, value: float) -> None:
        """
        Sets the objective value of a trial.

        Raises:
            FinishedTrialUpdateError: If the trial is already finished.
            InvalidTrialValueError: If the value is NaN or not a real number.
        """
        pass

    @abstractmethod
    def set_trial_state(self, trial_id: int, state: TrialState) -> None:
        """
        Sets the state of a trial.

        Raises:
            FinishedTrialUpdateError: If the trial is already finished.
        """
        pass

    @abstractmethod
    def set_trial_param(self, trial_id: int, name: str, value: float) -> None:
        """
        Records a sampled parameter value for a trial.

        Raises:
            FinishedTrialUpdateError: If the trial is already finished.
        """
        pass

    def get_best_trial(self) -> Optional[FrozenTrial]:
        """
        Returns the completed trial with the smallest value.

        Ties go to the trial created first. Completed trials without a value
        are ignored. Returns None if no trial qualifies.
        """
        completed = [
            t for t in self.get_all_trials()
            if t.state == TrialState.COMPLETE and t.value is not None
        ]
        if not completed:
            return None
        # min() keeps the first of equal keys, i.e. the lowest trial id
        return min(completed, key=lambda t: t.value)

    @property
    def n_trials(self) -> int:
        return len(self.get_all_trials())

    def __len__(self):
        return self.n_trials
