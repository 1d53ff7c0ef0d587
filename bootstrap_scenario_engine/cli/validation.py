"""CLI validation helpers."""

from __future__ import annotations

from bootstrap_scenario_engine.exceptions import ConfigValidationError

MODE_CHOICES = {
    "without": ("without_replacement",),
    "with": ("with_replacement",),
    "both": ("without_replacement", "with_replacement"),
}
FORMAT_CHOICES = {"text", "table", "json"}


def resolve_modes(mode: str) -> tuple[str, ...]:
    normalized = mode.lower().strip()
    if normalized not in MODE_CHOICES:
        raise ConfigValidationError(f"mode must be one of {sorted(MODE_CHOICES)}")
    return MODE_CHOICES[normalized]


def validate_output_format(fmt: str) -> str:
    normalized = fmt.lower().strip()
    if normalized not in FORMAT_CHOICES:
        raise ConfigValidationError(f"format must be one of {sorted(FORMAT_CHOICES)}")
    return normalized

