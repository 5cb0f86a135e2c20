"""
Trajectory Plot
===============
Renders a sampled integer trajectory (altitude vs downrange) to a figure,
optionally saved as PNG. Points are drawn as markers on the integer grid
they were truncated to, joined by a step line.
"""

import os
from typing import Optional

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from .projectile import Projectile


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b'],
}


def _apply_dark_style(fig, ax):
    fig.patch.set_facecolor(STYLE['bg_color'])
    ax.set_facecolor(STYLE['bg_color'])
    ax.tick_params(colors=STYLE['text_color'])
    ax.xaxis.label.set_color(STYLE['text_color'])
    ax.yaxis.label.set_color(STYLE['text_color'])
    ax.title.set_color(STYLE['text_color'])
    ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
    for spine in ax.spines.values():
        spine.set_color(STYLE['grid_color'])


def plot_trajectory(projectile: Projectile, save_path: Optional[str] = None) -> plt.Figure:
    """
    Plot the projectile's computed trajectory.

    Raises ValueError if `calculate` has not produced any points yet.
    """
    points = projectile.trajectory_array()
    if len(points) == 0:
        raise ValueError("trajectory is empty; call calculate() first")

    x, y = points[:, 0], points[:, 1]

    fig, ax = plt.subplots(figsize=(10, 5))
    _apply_dark_style(fig, ax)

    ax.step(x, y, where='post', color=STYLE['accent_colors'][0], linewidth=2)
    ax.plot(x, y, 'o', color=STYLE['accent_colors'][0], markersize=5)

    # Launch and apex
    ax.plot(x[0], y[0], 'o', color=STYLE['accent_colors'][2], markersize=10,
            label='Launch', zorder=5)
    idx_max = int(np.argmax(y))
    ax.plot(x[idx_max], y[idx_max], '^', color=STYLE['accent_colors'][3],
            markersize=10, label='Apex', zorder=5)

    ax.set_xlabel('Downrange (m, truncated)')
    ax.set_ylabel('Altitude (m, truncated)')
    ax.set_title(f'Trajectory (v₀={projectile.v0:g} m/s, '
                 f'α={projectile.alpha_deg:g}°, {len(points)} points)',
                 fontweight='bold')
    ax.legend(loc='upper right', facecolor='#1a1a1a', edgecolor='#444',
              labelcolor=STYLE['text_color'])
    ax.set_xlim(left=0)
    ax.set_ylim(bottom=0)

    fig.tight_layout()
    if save_path:
        out_dir = os.path.dirname(save_path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])
    return fig
