"""Serialization for params, results, and timeline export."""

from __future__ import annotations

import csv
import hashlib
import io
import json
from typing import Any

from pydantic import ValidationError

from realsave.config.schema import ProjectionParams, invalid_parameters
from realsave.core.engine import ProjectionResult
from realsave.utils.exceptions import ConfigError, ExportError

CSV_HEADER: tuple[str, ...] = ("Year", "InvestedCapital", "NominalValue", "RealValue")


def compute_params_hash(params: ProjectionParams) -> str:
    """Compute a deterministic SHA-256 hash of the params.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical params always produce the same hash.
    """
    canonical = json.dumps(params.model_dump(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_params(params: ProjectionParams) -> str:
    """Serialize params to a JSON string."""
    return json.dumps({"params": params.model_dump()}, indent=2)


def params_from_data(data: Any) -> ProjectionParams:
    """Validate a parsed mapping, either bare or nested under ``params``.

    Raises:
        ConfigError: If ``data`` is not a mapping.
        InvalidParameterError: If a value is missing or out of range.
    """
    if isinstance(data, dict) and "params" in data:
        data = data["params"]
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping of projection params, got {type(data).__name__}")
    try:
        return ProjectionParams.model_validate(data)
    except ValidationError as exc:
        raise invalid_parameters(exc) from exc


def load_params(json_str: str) -> ProjectionParams:
    """Deserialize params from a JSON string."""
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"params are not valid JSON: {exc}") from exc
    return params_from_data(data)


def dump_timeline_csv(result: ProjectionResult, include_age: bool = False) -> str:
    """Export the yearly rows as CSV.

    Args:
        result: Projection to export.
        include_age: Prepend an ``Age`` column. Requires ``result.start_age``.

    Returns:
        CSV string with Year, InvestedCapital, NominalValue, RealValue
        columns, one newline-terminated line per year.

    Raises:
        ExportError: If ``include_age`` is set but the result has no start age.
    """
    if include_age and result.start_age is None:
        raise ExportError("cannot export an Age column without a start age")

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    header = list(CSV_HEADER)
    if include_age:
        header.insert(1, "Age")
    writer.writerow(header)

    for row in result.rows:
        values = [row.year, row.invested_capital, row.nominal_value, row.real_value]
        if include_age:
            values.insert(1, result.timeline.age_at(row.year))
        writer.writerow(values)

    return output.getvalue()


def dump_result_json(result: ProjectionResult) -> str:
    """Serialize params, summary and rows to JSON."""
    summary = result.summary
    data = {
        "params": result.params.model_dump(),
        "params_hash": compute_params_hash(result.params),
        "start_age": result.start_age,
        "summary": {
            "nominal": summary.nominal,
            "real": summary.real,
            "invested_total": summary.invested_total,
            "interest_earned": summary.interest_earned,
        },
        "rows": [
            {
                "year": row.year,
                "invested_capital": row.invested_capital,
                "nominal_value": row.nominal_value,
                "real_value": row.real_value,
            }
            for row in result.rows
        ],
    }
    return json.dumps(data, indent=2)
