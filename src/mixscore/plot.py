from __future__ import annotations

from typing import Any, Optional

import numpy as np
import matplotlib.pyplot as plt

from .model import MixtureModel
from .scoring import SampleInput, mixture_density


def _default_grid(model: MixtureModel, sample: Optional[np.ndarray]) -> np.ndarray:
    lo = float(np.min(model.locations - 4.0 * model.scales))
    hi = float(np.max(model.locations + 4.0 * model.scales))
    if sample is not None and sample.size:
        lo, hi = min(lo, float(sample.min())), max(hi, float(sample.max()))
    return np.linspace(lo, hi, 400)


def plot_mixture(
    model: MixtureModel,
    sample: Optional[SampleInput] = None,
    ax: Any | None = None,
    grid: Optional[np.ndarray] = None,
    components: bool = True,
) -> Any:
    """
    Plot the mixture density; optionally overlay weighted components and a
    density-normalised histogram of `sample`.
    """
    if ax is None:
        fig, ax = plt.subplots()
        _ = fig  # silence linters if unused

    xs = None if sample is None else np.asarray(sample, dtype=float)
    if grid is None:
        grid = _default_grid(model, xs)
    grid = np.asarray(grid, dtype=float)

    if xs is not None:
        ax.hist(xs, bins="auto", density=True, alpha=0.3, label="sample")

    if components:
        kernel = np.vectorize(model.kernel, otypes=[float])
        for i, (w, mu, sigma) in enumerate(
            zip(model.weights, model.locations, model.scales), start=1
        ):
            ax.plot(grid, w * kernel(grid, mu, sigma), linestyle="--", label=f"component {i}")

    ax.plot(grid, mixture_density(grid, model), label="mixture")
    ax.set_xlabel("x")
    ax.set_ylabel("density")
    ax.legend()
    return ax
