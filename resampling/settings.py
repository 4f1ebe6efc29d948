"""Settings for the workshop walkthrough.

Values come from, in increasing precedence: the defaults below, environment
variables prefixed with :data:`ENV_PREFIX`, and explicit overrides (the
command-line flags of the walkthrough).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .errors import InvalidInput

__all__ = ["ENV_PREFIX", "Settings"]


ENV_PREFIX = "RESAMPLING_"

_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_value(name: str, value: Any, *, target: type) -> Any:
    if not isinstance(value, str):
        return value
    try:
        if target is bool:
            lowered = value.strip().lower()
            if lowered in _BOOL_TRUE:
                return True
            if lowered in _BOOL_FALSE:
                return False
            raise ValueError(f"cannot interpret '{value}' as boolean")
        if target is int:
            return int(value)
        if target is float:
            return float(value)
    except ValueError as exc:
        raise InvalidInput(f"{ENV_PREFIX}{name}: {exc}") from exc
    if target is Path:
        return Path(value).expanduser()
    return value


@dataclass(slots=True, frozen=True)
class Settings:
    """Immutable run configuration for :mod:`resampling.walkthrough`."""

    iterations: int = 10_000
    sample_size: int = 50
    seed: int = 42
    missing_fraction: float = 0.1
    output_dir: Path = Path("figures")
    log_level: str = "INFO"
    save_figures: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.iterations, bool) or self.iterations <= 0:
            raise InvalidInput(f"iterations must be positive, got {self.iterations}")
        if isinstance(self.sample_size, bool) or self.sample_size <= 0:
            raise InvalidInput(f"sample_size must be positive, got {self.sample_size}")
        if self.seed < 0:
            raise InvalidInput(f"seed must be non-negative, got {self.seed}")
        if not 0 <= self.missing_fraction < 1:
            raise InvalidInput(
                f"missing_fraction must be in [0, 1), got {self.missing_fraction}"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidInput(f"unknown log level {self.log_level!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "iterations": self.iterations,
            "sample_size": self.sample_size,
            "seed": self.seed,
            "missing_fraction": self.missing_fraction,
            "output_dir": str(self.output_dir),
            "log_level": self.log_level,
            "save_figures": self.save_figures,
        }

    @classmethod
    def from_env(
        cls,
        *,
        overrides: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "Settings":
        """Build settings from ``RESAMPLING_*`` variables and explicit overrides.

        Overrides whose value is ``None`` are ignored, so unset command-line
        flags fall through to the environment.
        """

        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        env = os.environ if environ is None else environ

        values: dict[str, Any] = {}
        for name, target in (
            ("iterations", int),
            ("sample_size", int),
            ("seed", int),
            ("missing_fraction", float),
            ("output_dir", Path),
            ("log_level", str),
            ("save_figures", bool),
        ):
            key = f"{ENV_PREFIX}{name.upper()}"
            if name in overrides:
                values[name] = _parse_value(name.upper(), overrides.pop(name), target=target)
            elif key in env:
                values[name] = _parse_value(name.upper(), env[key], target=target)

        if overrides:
            unknown = ", ".join(sorted(overrides))
            raise InvalidInput(f"Unknown override(s): {unknown}")

        return cls(**values)
