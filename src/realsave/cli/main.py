"""CLI entry point for realsave."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from realsave.analytics.metrics import contribution_breakdown
from realsave.analytics.sensitivity import run_sensitivity
from realsave.config.defaults import default_ages, default_params
from realsave.config.schema import ProjectionParams, validate_params
from realsave.core.engine import ProjectionResult, compute_timeline
from realsave.io.pdf import write_pdf_report
from realsave.io.serialize import dump_result_json, dump_timeline_csv
from realsave.io.yaml_loader import load_params_file
from realsave.utils.exceptions import ConfigError, ExportError, ProjectionError
from realsave.utils.money import format_currency, format_short

logger = logging.getLogger(__name__)


def _param_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the projection parameter options shared by every command."""
    options = [
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            default=None,
            help="YAML or JSON params file. Uses defaults if not provided.",
        ),
        click.option("--initial-capital", type=float, default=None, help="Starting balance."),
        click.option(
            "--monthly-contribution", type=float, default=None, help="Deposit made every month."
        ),
        click.option(
            "--interest-rate", type=float, default=None, help="Annual interest rate in percent."
        ),
        click.option(
            "--inflation-rate", type=float, default=None, help="Annual inflation rate in percent."
        ),
        click.option("--years", type=int, default=None, help="Projection horizon in years."),
        click.option("--current-age", type=int, default=None, help="Age today."),
        click.option("--retirement-age", type=int, default=None, help="Age at retirement."),
    ]
    for option in reversed(options):
        func = option(func)

    @functools.wraps(func)
    def wrapper(**kwargs: Any) -> Any:
        try:
            params, start_age = _resolve_params(
                config_path=kwargs.pop("config_path"),
                initial_capital=kwargs.pop("initial_capital"),
                monthly_contribution=kwargs.pop("monthly_contribution"),
                interest_rate=kwargs.pop("interest_rate"),
                inflation_rate=kwargs.pop("inflation_rate"),
                years=kwargs.pop("years"),
                current_age=kwargs.pop("current_age"),
                retirement_age=kwargs.pop("retirement_age"),
            )
        except ConfigError as exc:
            raise click.UsageError(str(exc)) from exc
        return func(params=params, start_age=start_age, **kwargs)

    return wrapper


def _resolve_params(
    config_path: Path | None,
    initial_capital: float | None,
    monthly_contribution: float | None,
    interest_rate: float | None,
    inflation_rate: float | None,
    years: int | None,
    current_age: int | None,
    retirement_age: int | None,
) -> tuple[ProjectionParams, int | None]:
    """Merge config file, defaults and CLI overrides into validated params.

    The horizon comes from ``--years`` if given, else from the ages. With a
    config file the ages only set the horizon when both are given; a lone
    ``--current-age`` just labels the rows.
    """
    base = load_params_file(config_path) if config_path is not None else default_params()

    # CLI overrides
    overrides: dict[str, Any] = {
        "initial_capital": initial_capital,
        "monthly_contribution": monthly_contribution,
        "annual_interest_rate_pct": interest_rate,
        "annual_inflation_rate_pct": inflation_rate,
        "horizon_years": years,
    }
    values = base.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})

    both_ages = current_age is not None and retirement_age is not None
    if config_path is not None and retirement_age is not None and current_age is None:
        raise ConfigError("--retirement-age needs --current-age when --config is given")
    if years is None and (both_ages or config_path is None):
        ages = default_ages()
        start_age = current_age if current_age is not None else ages.current_age
        params = ProjectionParams.from_ages(
            values["initial_capital"],
            values["monthly_contribution"],
            values["annual_interest_rate_pct"],
            values["annual_inflation_rate_pct"],
            current_age=start_age,
            retirement_age=(
                retirement_age if retirement_age is not None else ages.retirement_age
            ),
        )
        return params, start_age

    return validate_params(**values), current_age


@click.group()
@click.version_option(package_name="realsave")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """realsave — savings projection with monthly compounding and inflation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _echo_summary(result: ProjectionResult) -> None:
    p = result.params
    s = result.summary
    unit = "year" if p.horizon_years == 1 else "years"
    click.echo(
        f"Projecting {p.horizon_years} {unit}: {format_currency(p.initial_capital)} initial, "
        f"{format_currency(p.monthly_contribution)}/month, "
        f"{p.annual_interest_rate_pct:g}% interest, {p.annual_inflation_rate_pct:g}% inflation"
    )
    breakdown = contribution_breakdown(s)
    click.echo(f"\nNominal value:     {format_currency(s.nominal)}")
    click.echo(f"Real value:        {format_currency(s.real)}")
    click.echo(
        f"Total contributed: {format_currency(s.invested_total)}"
        f" ({breakdown.contributed_share:.1%})"
    )
    click.echo(
        f"Interest earned:   {format_currency(s.interest_earned)}"
        f" ({breakdown.interest_share:.1%})"
    )


def _echo_table(result: ProjectionResult) -> None:
    show_age = result.start_age is not None
    header = f"{'Year':>4}  {'Age':>3}  " if show_age else f"{'Year':>4}  "
    click.echo("\n" + header + f"{'Invested':>10}  {'Nominal':>10}  {'Real':>10}")
    for row in result.rows:
        prefix = f"{row.year:>4}  "
        if show_age:
            prefix += f"{result.timeline.age_at(row.year):>3}  "
        click.echo(
            prefix
            + f"{format_short(row.invested_capital):>10}  "
            + f"{format_short(row.nominal_value):>10}  "
            + f"{format_short(row.real_value):>10}"
        )


@cli.command()
@_param_options
@click.option("--table", is_flag=True, help="Print the year-by-year table.")
@click.option(
    "--csv", "csv_path", type=click.Path(path_type=Path), default=None, help="Write rows as CSV."
)
@click.option(
    "--pdf", "pdf_path", type=click.Path(path_type=Path), default=None, help="Write a PDF report."
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write results JSON.",
)
def run(
    params: ProjectionParams,
    start_age: int | None,
    table: bool,
    csv_path: Path | None,
    pdf_path: Path | None,
    output_path: Path | None,
) -> None:
    """Project a savings plan and print the final totals."""
    try:
        result = compute_timeline(params, start_age=start_age)
    except ProjectionError as exc:
        raise click.ClickException(str(exc)) from exc
    logger.debug("computed %d rows", len(result.rows))

    _echo_summary(result)
    if table:
        _echo_table(result)

    try:
        if csv_path is not None:
            csv_path.write_text(dump_timeline_csv(result))
            click.echo(f"\nCSV written to {csv_path}")
        if output_path is not None:
            output_path.write_text(dump_result_json(result))
            click.echo(f"\nResults written to {output_path}")
        if pdf_path is not None:
            write_pdf_report(result, pdf_path)
            click.echo(f"\nPDF written to {pdf_path}")
    except OSError as exc:
        raise click.ClickException(f"export failed: {exc}") from exc
    except ExportError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@_param_options
@click.option(
    "--pct",
    default=0.10,
    show_default=True,
    type=float,
    help="Relative perturbation applied to each parameter.",
)
def sensitivity(params: ProjectionParams, start_age: int | None, pct: float) -> None:
    """Show how each parameter moves the final real value."""
    try:
        report = run_sensitivity(params, perturbation_pct=pct)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    except ProjectionError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Base real value: {format_currency(report.base_real)}\n")
    for r in report.results:
        click.echo(
            f"{r.parameter_name:<22} {r.low_value:>10,.2f} → {format_currency(r.low_real):>12}"
            f"   {r.high_value:>10,.2f} → {format_currency(r.high_real):>12}"
            f"   impact {format_currency(r.impact)}"
        )


if __name__ == "__main__":
    cli()
