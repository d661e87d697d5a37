from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence, Union, cast

import numpy as np
from numpy.typing import NDArray

from .errors import DimensionMismatch, InvalidArgument
from .kernels import Kernel

ParamInput = Union[np.ndarray, Sequence[float]]


def _coerce_params(values: object, name: str) -> NDArray[np.float64]:
    """Produce a read-only 1D float64 copy of a per-component parameter vector."""
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise DimensionMismatch(f"{name} must be 1D, got shape {arr.shape}")
    arr.setflags(write=False)
    return cast(NDArray[np.float64], arr)


@dataclass(frozen=True, eq=False)
class MixtureModel:
    """
    Parameters of a univariate finite mixture:

        f(x) = sum_i weights[i] * kernel(x, locations[i], scales[i])

    The parameters are fitted elsewhere; this object only holds them. The
    vectors are stored as read-only float64 arrays and the kernel is kept by
    reference.

    Weights are not required to be non-negative or to sum to one. With
    `validate=True` (default) every parameter must be finite and every scale
    strictly positive; the length checks always apply.
    """

    weights: ParamInput
    locations: ParamInput
    scales: ParamInput
    kernel: Kernel
    validate: bool = field(default=True, repr=False)

    def __post_init__(self) -> None:
        w = _coerce_params(self.weights, "weights")
        mu = _coerce_params(self.locations, "locations")
        sigma = _coerce_params(self.scales, "scales")

        if not (w.size == mu.size == sigma.size):
            raise DimensionMismatch(
                f"weights, locations and scales must have equal length, "
                f"got {w.size}, {mu.size}, {sigma.size}"
            )
        if mu.size == 0:
            raise InvalidArgument("a mixture needs at least one component")
        if not callable(self.kernel):
            raise TypeError(f"kernel must be callable, got {type(self.kernel).__name__}")

        if self.validate:
            for name, arr in (("weights", w), ("locations", mu), ("scales", sigma)):
                if not np.all(np.isfinite(arr)):
                    raise InvalidArgument(f"{name} must be finite")
            if np.any(sigma <= 0):
                raise InvalidArgument("scales must be strictly positive")

        # frozen: bypass __setattr__ to store the coerced arrays
        object.__setattr__(self, "weights", w)
        object.__setattr__(self, "locations", mu)
        object.__setattr__(self, "scales", sigma)

    @property
    def n_components(self) -> int:
        return int(np.asarray(self.locations).size)

    def copy(self) -> "MixtureModel":
        """Independent copy of the parameter vectors; the kernel is shared."""
        return replace(
            self,
            weights=np.array(self.weights),
            locations=np.array(self.locations),
            scales=np.array(self.scales),
        )
