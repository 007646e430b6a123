import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from scipy import stats

from .data import DOMAIN
from .metrics import residuals

Y_LIMITS = (-2.0, 2.0)


def apply_theme():
    """Set up Matplotlib and Seaborn for the playground charts."""
    sns.set_theme(style="whitegrid", palette="husl")
    plt.rcParams['figure.figsize'] = (12, 7)
    plt.rcParams['font.size'] = 10


def plot_playground(training_set, true_line, model_line, title="Model vs. Ground Truth"):
    """
    Draw the training data, the ground truth and the fitted model on one axis.

    Returns the figure; the caller is responsible for closing it.
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    ax.scatter(training_set.x, training_set.y,
               label='Training Data', color='#4299E1', alpha=0.8, s=40, zorder=3)
    ax.plot(true_line.x, true_line.y,
            label='True Function', color='#718096', linewidth=2, linestyle='--')
    ax.plot(model_line.x, model_line.y,
            label='Model', color='#9F7AEA', linewidth=3)

    ax.set_xlim(*DOMAIN)
    ax.set_ylim(*Y_LIMITS)
    ax.set_xlabel('Input (X)')
    ax.set_ylabel('Output (Y)')
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.legend(loc='upper left', framealpha=0.9)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    return fig


def plot_residuals(model, training_set, model_name="Model"):
    """
    Residual diagnostics for the current fit.

    Left: residuals against x, where a pattern means structure the model
    missed. Right: normal Q-Q plot of the residuals.
    """
    res = residuals(model, training_set)
    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))

    axes[0].scatter(training_set.x, res, alpha=0.7, color='steelblue')
    axes[0].axhline(y=0, color='red', linestyle='--', alpha=0.8)
    axes[0].set_xlabel('Input (X)')
    axes[0].set_ylabel('Residual')
    axes[0].set_title(f'Training Residuals ({model_name})')
    axes[0].grid(True, alpha=0.3)

    if np.ptp(res) > 0:
        stats.probplot(res, dist="norm", plot=axes[1])
    else:
        # probplot cannot fit a line through constant residuals
        axes[1].text(0.5, 0.5, 'Residuals are constant', ha='center', va='center',
                     transform=axes[1].transAxes)
    axes[1].set_title(f'Q-Q Plot - Residuals ({model_name})')
    axes[1].grid(True, alpha=0.3)

    rmse = np.sqrt(np.mean(res ** 2))
    fig.suptitle(f'Residual Analysis: {model_name} | Train RMSE: {rmse:.3f}',
                 fontsize=12, fontweight='bold')
    plt.tight_layout()
    return fig
