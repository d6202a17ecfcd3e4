"""One-at-a-time (OAT) sensitivity analysis for projection parameters."""

from __future__ import annotations

from dataclasses import dataclass, field

from realsave.config.schema import ProjectionParams
from realsave.core.engine import compute_timeline
from realsave.utils.exceptions import ConfigError


@dataclass(frozen=True)
class SensitivityResult:
    """Result of perturbing a single parameter."""

    parameter_name: str
    base_value: float
    low_value: float
    high_value: float
    base_real: int
    low_real: int
    high_real: int
    impact: int  # high_real - low_real


@dataclass
class SensitivityReport:
    """Full report of one-at-a-time sensitivity analysis."""

    results: list[SensitivityResult] = field(default_factory=list)
    base_real: int = 0


@dataclass(frozen=True)
class _ParamSpec:
    """Internal spec for a perturbable parameter."""

    attr: str
    is_integer: bool = False


_PARAMETERS: dict[str, _ParamSpec] = {
    "Initial Capital": _ParamSpec("initial_capital"),
    "Monthly Contribution": _ParamSpec("monthly_contribution"),
    "Interest Rate": _ParamSpec("annual_interest_rate_pct"),
    "Inflation Rate": _ParamSpec("annual_inflation_rate_pct"),
    "Horizon": _ParamSpec("horizon_years", is_integer=True),
}


def available_parameters() -> list[str]:
    """Names accepted by :func:`run_sensitivity`."""
    return list(_PARAMETERS)


def _bounds(spec: _ParamSpec, base: float, pct: float) -> tuple[float, float]:
    if spec.is_integer:
        delta = max(1, round(base * pct))
        return max(1, int(base) - delta), int(base) + delta
    return max(0.0, base * (1 - pct)), base * (1 + pct)


def _final_real(params: ProjectionParams, attr: str, value: float) -> int:
    variant = params.model_copy(update={attr: value})
    return compute_timeline(variant).summary.real


def run_sensitivity(
    params: ProjectionParams,
    perturbation_pct: float = 0.10,
    parameters: list[str] | None = None,
) -> SensitivityReport:
    """Run OAT sensitivity analysis on the final real value.

    Perturbs each parameter by ±perturbation_pct (whole years for the
    horizon) and records the final inflation-adjusted value.

    Args:
        params: Base projection parameters.
        perturbation_pct: Relative perturbation, e.g. 0.10 for ±10%.
        parameters: Subset of parameter names to analyze. None = all.

    Returns:
        SensitivityReport with results sorted by absolute impact (largest first).

    Raises:
        ConfigError: If a parameter name is unknown or the perturbation is
            not in (0, 1].
    """
    if not 0 < perturbation_pct <= 1:
        raise ConfigError(f"perturbation_pct must be in (0, 1], got {perturbation_pct}")

    names = parameters if parameters is not None else available_parameters()
    unknown = [name for name in names if name not in _PARAMETERS]
    if unknown:
        raise ConfigError(f"unknown sensitivity parameters: {', '.join(unknown)}")

    base_real = compute_timeline(params).summary.real
    report = SensitivityReport(base_real=base_real)

    for name in names:
        spec = _PARAMETERS[name]
        base_value = float(getattr(params, spec.attr))
        low, high = _bounds(spec, base_value, perturbation_pct)
        low_real = _final_real(params, spec.attr, low)
        high_real = _final_real(params, spec.attr, high)
        report.results.append(
            SensitivityResult(
                parameter_name=name,
                base_value=base_value,
                low_value=float(low),
                high_value=float(high),
                base_real=base_real,
                low_real=low_real,
                high_real=high_real,
                impact=high_real - low_real,
            )
        )

    report.results.sort(key=lambda r: abs(r.impact), reverse=True)
    return report
