from __future__ import annotations

from typing import Callable, Union

import numpy as np
from numpy.typing import ArrayLike
from scipy import stats

# (observation, location, scale) -> density. Scalars in, scalar out; the stock
# kernels below also broadcast over numpy arrays.
Kernel = Callable[[float, float, float], float]

Density = Union[float, np.ndarray]


def gaussian_kernel(x: ArrayLike, location: ArrayLike, scale: ArrayLike) -> Density:
    """Normal density with mean `location` and standard deviation `scale`."""
    return stats.norm.pdf(x, loc=location, scale=scale)


def laplace_kernel(x: ArrayLike, location: ArrayLike, scale: ArrayLike) -> Density:
    """Laplace (double exponential) density with the given location and scale."""
    return stats.laplace.pdf(x, loc=location, scale=scale)


def student_t_kernel(df: float) -> Kernel:
    """
    Build a location-scale Student-t kernel with `df` degrees of freedom.

    The degrees of freedom are fixed by the caller and are not counted as a
    free parameter by the information criteria.
    """
    if not df > 0:
        raise ValueError(f"degrees of freedom must be positive, got {df}")

    def kernel(x: ArrayLike, location: ArrayLike, scale: ArrayLike) -> Density:
        return stats.t.pdf(x, df, loc=location, scale=scale)

    kernel.__name__ = f"student_t_kernel(df={df})"
    return kernel
