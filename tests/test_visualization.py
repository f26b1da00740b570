import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from minihpo.visualization import plot_optimization_history  # noqa: E402


def objective(trial):
    x = trial.suggest_uniform("x", -5.0, 5.0)
    return x ** 2


def test_plot_optimization_history(study, tmp_path):
    study.optimize(objective, 10)
    save_path = tmp_path / "history.png"

    ax = plot_optimization_history(study, save_path=str(save_path))

    assert ax.get_xlabel() == 'Trial'
    assert save_path.exists()
    best_line = ax.get_lines()[1]
    assert best_line.get_ydata()[-1] == pytest.approx(study.best_value)

    # the caller owns the figure
    assert plt.fignum_exists(ax.figure.number)
    plt.close(ax.figure)
    assert not plt.fignum_exists(ax.figure.number)


def test_plot_requires_completed_trials(study):
    with pytest.raises(ValueError):
        plot_optimization_history(study)
