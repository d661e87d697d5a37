from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union, cast

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidArgument, NumericDomainError
from .model import MixtureModel

logger = logging.getLogger(__name__)

SampleInput = Union[np.ndarray, Sequence[float]]


def _coerce_sample(sample: object) -> NDArray[np.float64]:
    arr = np.asarray(sample, dtype=float)
    if arr.ndim != 1:
        raise InvalidArgument(f"sample must be 1D, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidArgument("sample must contain at least one observation")
    return cast(NDArray[np.float64], arr)


def n_params(model: MixtureModel) -> int:
    """
    Free parameters of a K-component mixture: K-1 weights (they sum to one),
    K locations and K scales, i.e. 3K - 1.
    """
    return 3 * model.n_components - 1


def mixture_density(x: SampleInput, model: MixtureModel) -> NDArray[np.float64]:
    """
    Mixture density at each point of `x`, shape (n,):

        f(x) = sum_i w_i * kernel(x, mu_i, sigma_i)

    The kernel is evaluated on the full (n, K) grid through np.vectorize, so
    kernels written for scalars work as well as array-aware ones.
    """
    xs = np.atleast_1d(np.asarray(x, dtype=float))
    kernel = np.vectorize(model.kernel, otypes=[float])
    comp = kernel(xs[:, None], model.locations[None, :], model.scales[None, :])
    return cast(NDArray[np.float64], comp @ model.weights)


def log_likelihood(sample: SampleInput, model: MixtureModel) -> float:
    """
    Log-likelihood of the sample under the mixture:

        l = sum_x log f(x)

    Raises InvalidArgument for an empty sample and NumericDomainError when the
    density is zero, negative or NaN at any observation (log undefined).
    """
    x = _coerce_sample(sample)
    dens = mixture_density(x, model)

    bad = ~(dens > 0)  # also catches NaN
    if bad.any():
        first = int(np.flatnonzero(bad)[0])
        raise NumericDomainError(
            f"mixture density is not positive at {int(bad.sum())} of {x.size} "
            f"observations (first: x={x[first]!r}, density={dens[first]!r})"
        )

    ll = float(np.sum(np.log(dens)))
    logger.debug(
        "log-likelihood over n=%d observations, K=%d components: %r",
        x.size,
        model.n_components,
        ll,
    )
    return ll


def aic(sample: SampleInput, model: MixtureModel) -> float:
    """Akaike Information Criterion: AIC = 2k - 2l."""
    return 2 * n_params(model) - 2 * log_likelihood(sample, model)


def aic3(sample: SampleInput, model: MixtureModel) -> float:
    """
    Modified AIC with a penalty of 3 per parameter: AIC3 = 3k - 2l.

    Bozdogan (1994) proposed it for mixture models, where the plain AIC tends
    to select too many components.
    """
    return 3 * n_params(model) - 2 * log_likelihood(sample, model)


def bic(sample: SampleInput, model: MixtureModel) -> float:
    """Bayesian Information Criterion: BIC = log(n) k - 2l."""
    x = _coerce_sample(sample)
    return float(np.log(x.size)) * n_params(model) - 2 * log_likelihood(x, model)


@dataclass(frozen=True)
class FitIndices:
    """Log-likelihood and information criteria of one model on one sample."""

    log_likelihood: float
    aic: float
    aic3: float
    bic: float
    n_params: int
    n_obs: int


def fit_indices(sample: SampleInput, model: MixtureModel) -> FitIndices:
    """
    Compute all fit indices from a single log-likelihood evaluation.

    Values are identical to calling log_likelihood/aic/aic3/bic separately.
    """
    x = _coerce_sample(sample)
    ll = log_likelihood(x, model)
    k = n_params(model)
    return FitIndices(
        log_likelihood=ll,
        aic=2 * k - 2 * ll,
        aic3=3 * k - 2 * ll,
        bic=float(np.log(x.size)) * k - 2 * ll,
        n_params=k,
        n_obs=int(x.size),
    )


class MixtureScorer:
    """
    Likelihood-based metrics for a fixed mixture model.

    Binds the model once and scores any number of samples against it. The
    model is only read, so one scorer may be shared freely.
    """

    def __init__(self, model: MixtureModel) -> None:
        self.model = model

    @property
    def n_params(self) -> int:
        return n_params(self.model)

    def density(self, x: SampleInput) -> NDArray[np.float64]:
        return mixture_density(x, self.model)

    def log_likelihood(self, sample: SampleInput) -> float:
        return log_likelihood(sample, self.model)

    def aic(self, sample: SampleInput) -> float:
        return aic(sample, self.model)

    def aic3(self, sample: SampleInput) -> float:
        return aic3(sample, self.model)

    def bic(self, sample: SampleInput) -> float:
        return bic(sample, self.model)

    def fit_indices(self, sample: SampleInput) -> FitIndices:
        return fit_indices(sample, self.model)
