"""
abdash.core.config
==================

Presentation settings for significance results.

The engine formulas themselves are fixed (alpha levels, z-scores, series caps
live as module constants next to the code that uses them); this configuration
only controls the confidence level used for per-variant intervals and how many
decimal places results are rendered with.

Examples
--------
>>> from abdash.core.config import SignificanceConfig
>>> cfg = SignificanceConfig(confidence_level=0.99)
>>> cfg.validate()
>>> SignificanceConfig(p_value_digits=-1).validate()
Traceback (most recent call last):
...
abdash.core.errors.ConfigError: p_value_digits must be a non-negative integer, got -1
"""

from __future__ import annotations
from dataclasses import dataclass

from abdash.core.errors import ConfigError


@dataclass(frozen=True)
class SignificanceConfig:
    """
    Settings shared by the comparison facade and the reporter.

    Parameters
    ----------
    confidence_level : float, default=0.95
        Level for per-variant proportion intervals. Only 0.95 and 0.99 map to
        distinct z-scores; any other level in (0, 1) uses the 95% z-score.
    statistic_digits : int, default=3
        Decimal places for test statistics and mean differences.
    p_value_digits : int, default=4
        Decimal places for p-values.
    effect_digits : int, default=3
        Decimal places for Cohen's h.
    """

    confidence_level: float = 0.95
    statistic_digits: int = 3
    p_value_digits: int = 4
    effect_digits: int = 3

    def validate(self) -> None:
        """Validate configuration values."""
        if not 0 < self.confidence_level < 1:
            raise ConfigError(
                f"confidence_level must be in (0, 1), got {self.confidence_level}"
            )
        for name in ("statistic_digits", "p_value_digits", "effect_digits"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer, got {value}")
