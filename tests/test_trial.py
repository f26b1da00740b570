import pytest

from minihpo import (
    DistributionValidationError,
    FinishedTrialUpdateError,
    Trial,
    TrialError,
    TrialNotFoundError,
    TrialState,
)


def test_suggest_uniform_records_param(study):
    """
    Tests that a suggested value is within bounds and stored verbatim.
    """
    trial_id = study.storage.create_new_trial()
    trial = Trial(study, trial_id)

    x = trial.suggest_uniform("x", -1.0, 1.0)

    assert -1.0 <= x < 1.0
    assert study.storage.get_trial(trial_id).params == {"x": x}
    assert trial.params == {"x": x}


def test_suggest_uniform_repeated_name_resamples(study):
    """
    Tests that suggesting the same name twice draws again and overwrites.
    """
    trial = Trial(study, study.storage.create_new_trial())

    first = trial.suggest_uniform("x", 0.0, 1.0)
    second = trial.suggest_uniform("x", 0.0, 1.0)

    assert first != second
    assert trial.params == {"x": second}


def test_trials_share_the_sampler(study):
    """
    Tests that two trials of the same study draw from one advancing sequence.
    """
    a = Trial(study, study.storage.create_new_trial())
    b = Trial(study, study.storage.create_new_trial())

    assert a.suggest_uniform("x", 0.0, 1.0) != b.suggest_uniform("x", 0.0, 1.0)


def test_suggest_uniform_unknown_trial(study):
    trial = Trial(study, 3)
    with pytest.raises(TrialNotFoundError, match="trial_id=3"):
        trial.suggest_uniform("x", 0.0, 1.0)


def test_suggest_uniform_finished_trial(study):
    trial_id = study.storage.create_new_trial()
    study.storage.set_trial_state(trial_id, TrialState.FAILED)
    trial = Trial(study, trial_id)

    with pytest.raises(FinishedTrialUpdateError):
        trial.suggest_uniform("x", 0.0, 1.0)
    assert study.storage.get_trial(trial_id).params == {}


def test_suggest_uniform_invalid_bounds(study):
    trial = Trial(study, study.storage.create_new_trial())
    with pytest.raises(DistributionValidationError):
        trial.suggest_uniform("x", 1.0, 0.0)
    assert trial.params == {}


def test_params_of_unknown_trial(study):
    with pytest.raises(TrialNotFoundError):
        Trial(study, 0).params


def test_suggest_uniform_overflowing_range(study):
    """
    Tests that a range too wide for a float is reported as a TrialError.
    """
    trial = Trial(study, study.storage.create_new_trial())
    with pytest.raises(TrialError):
        trial.suggest_uniform("x", -1e308, 1e308)
    assert trial.params == {}
