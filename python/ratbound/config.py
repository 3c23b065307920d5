# RatBound SDK - Configuration
# Copyright (c) 2024 RatBound Contributors. All rights reserved.

"""Configuration settings for the transcendental engine."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Config:
    """
    Configuration for interval evaluation.

    Attributes:
        precision: Default precision code. A negative ``-n`` means an
                   epsilon of ``10^-n``, a positive ``n`` means ``1/n``.
        max_series_terms: Maximum number of terms summed in any series.
        max_refinements: Maximum number of tightening rounds used to reach
                         the requested width.
        max_newton_iterations: Maximum Newton steps for n-th roots.
        allow_float_fallback: Return a padded float estimate instead of
                              failing when a series cap is reached.
    """
    precision: int = -6
    max_series_terms: int = 2000
    max_refinements: int = 12
    max_newton_iterations: int = 100
    allow_float_fallback: bool = True

    def __post_init__(self):
        if self.precision == 0:
            raise ValueError("precision must be non-zero")
        if self.max_series_terms < 1 or self.max_refinements < 1:
            raise ValueError("iteration caps must be positive")

    @classmethod
    def low_precision(cls) -> Config:
        """Fast, lower precision configuration."""
        return cls(
            precision=-3,
            max_series_terms=200,
            max_refinements=6,
        )

    @classmethod
    def medium_precision(cls) -> Config:
        """Balanced precision/speed configuration (default)."""
        return cls()

    @classmethod
    def high_precision(cls) -> Config:
        """High precision configuration that never falls back to floats."""
        return cls(
            precision=-30,
            max_series_terms=10000,
            max_refinements=20,
            max_newton_iterations=400,
            allow_float_fallback=False,
        )

    def __repr__(self) -> str:
        return (
            f"Config(precision={self.precision}, "
            f"max_series_terms={self.max_series_terms}, "
            f"allow_float_fallback={self.allow_float_fallback})"
        )


DEFAULT_CONFIG = Config()
