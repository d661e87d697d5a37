import numpy as np
import matplotlib.pyplot as plt

from mixscore import (
    MixtureModel,
    MixtureScorer,
    describe,
    gaussian_kernel,
    laplace_kernel,
)
from mixscore.plot import plot_mixture

# Sample from a two-component Gaussian mixture
rng = np.random.default_rng(123)
sample = np.concatenate([rng.normal(-2.0, 0.8, 300), rng.normal(1.5, 1.2, 700)])

# Parameters as they might come out of an external fit
candidates = {
    "1 x normal": MixtureModel([1.0], [0.45], [1.9], gaussian_kernel),
    "2 x normal": MixtureModel([0.3, 0.7], [-2.0, 1.5], [0.8, 1.2], gaussian_kernel),
    "2 x laplace": MixtureModel([0.3, 0.7], [-2.0, 1.5], [0.6, 0.9], laplace_kernel),
}

for name, model in candidates.items():
    fit = MixtureScorer(model).fit_indices(sample)
    print(f"{name:>12}: AIC={fit.aic:10.2f}  AIC3={fit.aic3:10.2f}  BIC={fit.bic:10.2f}")

describe(candidates["2 x normal"], sample)

ax = plot_mixture(candidates["2 x normal"], sample=sample)
ax.set_title("Two-component normal mixture")
plt.show()
