"""Visualization utilities for print estimates.

This module provides functions to chart the cost and time breakdown of an
estimate and how cost and time respond to the infill ratio.
"""

from dataclasses import replace
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from print_estimator.estimator import estimate
from print_estimator.models import EstimateResult, PartParameters, PrinterSettings
from print_estimator.report import cost_breakdown, time_breakdown


def _finish(fig: plt.Figure, show: bool, save_path: Optional[str]) -> plt.Figure:
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def _draw_cost(ax: plt.Axes, result: EstimateResult) -> None:
    labels, amounts = zip(*cost_breakdown(result))
    ax.bar(labels, amounts, color=["#8884d8", "#82ca9d", "#ffc658"])
    ax.set_ylabel("Cost")
    ax.set_title(f"Cost Breakdown (total {result.total_cost:.2f})")
    ax.grid(True, axis="y", alpha=0.3)


def _draw_time(ax: plt.Axes, result: EstimateResult) -> None:
    labels, hours = zip(*time_breakdown(result))
    ax.bar(labels, hours, color=["#82ca9d", "#8884d8"])
    ax.axhline(
        result.print_time_hours,
        color="red",
        linestyle="--",
        linewidth=2,
        label=f"Total with penalty ({result.print_time_hours:.2f} h)",
    )
    ax.set_ylabel("Time (hours)")
    ax.set_title("Time Analysis")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)


def plot_cost_breakdown(
    result: EstimateResult,
    title: str = "Cost Breakdown",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot material, machine and setup cost (single panel).

    Args:
        result: Estimate to plot
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    fig, ax = plt.subplots(figsize=(6, 4))
    _draw_cost(ax, result)
    ax.set_title(title)
    return _finish(fig, show, save_path)


def plot_time_breakdown(
    result: EstimateResult,
    title: str = "Time Analysis",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot wall and infill deposition time against the total (single panel).

    Args:
        result: Estimate to plot
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    fig, ax = plt.subplots(figsize=(6, 4))
    _draw_time(ax, result)
    ax.set_title(title)
    return _finish(fig, show, save_path)


def plot_estimate(
    result: EstimateResult,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot a two-panel summary of an estimate.

    Creates a side-by-side visualization showing:
    - Cost breakdown (material, machine, setup)
    - Time breakdown (walls, infill) with the penalised total as a line

    Args:
        result: Estimate to plot
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Example:
        >>> result = estimate(printer, part)
        >>> plot_estimate(result, show=False, save_path="quote.png")
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    if title is None:
        title = (
            f"Print Estimate\n"
            f"Total: {result.total_cost:.2f} | "
            f"Time: {result.print_time_hours:.2f} h | "
            f"Shell ratio: {result.shell_ratio:.3f}"
        )

    fig.suptitle(title, fontsize=14, fontweight="bold")

    _draw_cost(ax1, result)
    _draw_time(ax2, result)

    return _finish(fig, show, save_path)


def plot_infill_sweep(
    printer: PrinterSettings,
    part: PartParameters,
    ratios: Optional[Sequence[float]] = None,
    title: str = "Infill Ratio Sweep",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot total cost and print time as the infill ratio varies.

    Args:
        printer: Printer settings held fixed
        part: Part whose infill_ratio is swept
        ratios: Infill ratios to evaluate (default: 0 to 1 in 21 steps)
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object with two vertically stacked panels
    """
    if ratios is None:
        ratios = np.linspace(0.0, 1.0, 21)
    ratios = np.asarray(ratios, dtype=float)

    if ratios.size == 0:
        raise ValueError("Cannot plot empty ratio list")

    results = [estimate(printer, replace(part, infill_ratio=float(r))) for r in ratios]
    costs = np.array([r.total_cost for r in results])
    hours = np.array([r.print_time_hours for r in results])

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
    fig.suptitle(title, fontsize=14, fontweight="bold")

    ax1.plot(ratios, costs, marker="o", linewidth=2, label="Total Cost")
    ax1.axvline(
        part.infill_ratio,
        color="orange",
        linestyle="--",
        alpha=0.7,
        label=f"Current ({part.infill_ratio:.2f})",
    )
    ax1.set_ylabel("Total Cost")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    ax2.plot(ratios, hours, marker="o", color="green", linewidth=2, label="Print Time")
    ax2.set_ylabel("Print Time (hours)")
    ax2.set_xlabel("Infill Ratio")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    return _finish(fig, show, save_path)
