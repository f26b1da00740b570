"""
Example 1: Quadratic Minimization
---------------------------------

Minimizes f(x, y) = (x - 3)^2 + (y - 5)^2 over [0, 10) x [0, 10) with the
random sampler. The known optimum is at (x=3, y=5), with a value of 0.
"""

import matplotlib.pyplot as plt

import minihpo
from minihpo.visualization import plot_optimization_history


def objective(trial):
    """
    The objective function to be minimized.

    Args:
        trial (Trial): The trial handle provided by the Study.

    Returns:
        float: The value of the function for the sampled parameters.
    """
    x = trial.suggest_uniform("x", 0.0, 10.0)
    y = trial.suggest_uniform("y", 0.0, 10.0)
    return (x - 3) ** 2 + (y - 5) ** 2


def main():
    study = minihpo.create_study(
        storage=minihpo.InMemoryStorage(),
        sampler=minihpo.RandomSampler(seed=0),
        config=minihpo.StudyConfig(verbose=False),
    )
    study.optimize(objective, 500)

    best_trial = study.best_trial
    print(f"Best trial #{best_trial.trial_id}: value={best_trial.value:.6f} params={best_trial.params}")

    df = study.get_trials_dataframe()
    print(df.sort_values('value').head())

    ax = plot_optimization_history(study, save_path='quadratic_optimization.png')
    plt.close(ax.figure)


if __name__ == "__main__":
    main()
