"""
mixscore: fit indices for univariate finite mixture models:
- Mixture model parameters with a pluggable kernel density
- Log-likelihood of a sample under the mixture
- Information criteria (AIC, AIC3, BIC) with 3K - 1 free parameters
- Text report and density plot
"""

from .errors import InvalidArgument, DimensionMismatch, NumericDomainError
from .kernels import Kernel, gaussian_kernel, laplace_kernel, student_t_kernel
from .model import MixtureModel
from .scoring import (
    FitIndices,
    MixtureScorer,
    aic,
    aic3,
    bic,
    fit_indices,
    log_likelihood,
    mixture_density,
    n_params,
)
from .report import describe

__all__ = [
    "InvalidArgument",
    "DimensionMismatch",
    "NumericDomainError",
    "Kernel",
    "gaussian_kernel",
    "laplace_kernel",
    "student_t_kernel",
    "MixtureModel",
    "FitIndices",
    "MixtureScorer",
    "aic",
    "aic3",
    "bic",
    "fit_indices",
    "log_likelihood",
    "mixture_density",
    "n_params",
    "describe",
]

__version__ = "2025.10.0"
