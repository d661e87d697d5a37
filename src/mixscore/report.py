from __future__ import annotations

import sys
from typing import Optional, TextIO

from .model import MixtureModel
from .scoring import SampleInput, fit_indices

_PLAIN_RULE = "-" * 18


def describe(
    model: MixtureModel,
    sample: Optional[SampleInput] = None,
    file: Optional[TextIO] = None,
) -> str:
    """
    Pretty-print the parameters and fit indices of `model`.

    With a sample, the report opens with log-likelihood, AIC, AIC3 and BIC
    framed by rules as wide as the log-likelihood line. Without one, fixed
    rules replace the fit block and no index is computed.

    The text is written to `file` (default: sys.stdout) and also returned.
    Fit indices are computed before anything is written, so a failing
    metric leaves the sink untouched.
    """
    lines: list[str] = []

    if sample is not None:
        fit = fit_indices(sample, model)
        ll_line = f"Log-likelihood: {fit.log_likelihood}"
        rule = "-" * len(ll_line)
        lines += [
            rule,
            "",
            ll_line,
            f"AIC: {fit.aic}",
            f"AIC3: {fit.aic3}",
            f"BIC: {fit.bic}",
            "",
        ]
    else:
        rule = _PLAIN_RULE
        lines += [rule, ""]

    for i, (w, mu, sigma) in enumerate(
        zip(model.weights, model.locations, model.scales), start=1
    ):
        lines += [
            f"Component {i}:",
            f"\tα: {float(w)}",
            f"\tμ: {float(mu)}",
            f"\tσ: {float(sigma)}",
            "",
        ]

    lines.append(rule)
    text = "\n".join(lines) + "\n"

    out = sys.stdout if file is None else file
    out.write(text)
    return text
