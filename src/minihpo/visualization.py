import matplotlib.pyplot as plt
import numpy as np

from .trial import TrialState


def plot_optimization_history(study, save_path=None):
    """
    Plots the optimization history of a study.

    Completed trial values are drawn as points against their trial id, with
    the running best (lowest) value as a step line.

    The figure stays open in pyplot and belongs to the caller; close it with
    ``plt.close(ax.figure)`` once it is no longer needed.

    Args:
        study (Study): The study to visualize.
        save_path (str, optional): If provided, saves the plot to this file path.

    Returns:
        matplotlib.axes.Axes: The axes holding the plot.
    """
    complete_trials = [t for t in study.trials if t.state == TrialState.COMPLETE]
    if not complete_trials:
        raise ValueError("No completed trials to plot.")

    trial_ids = [t.trial_id for t in complete_trials]
    values = np.array([t.value for t in complete_trials], dtype=float)
    best_values = np.minimum.accumulate(values)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(trial_ids, values, 'o', alpha=0.5, markersize=4, label='Objective Value')
    ax.step(trial_ids, best_values, 'r-', where='post', linewidth=2, label='Best Value')
    ax.set_title('Optimization History')
    ax.set_xlabel('Trial')
    ax.set_ylabel('Objective Value')
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return ax
