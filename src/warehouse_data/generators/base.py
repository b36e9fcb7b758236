"""
Base classes for the warehouse data generators.

This module provides:
- GeneratorContext: Random state, clock and config passed to all generators
- BaseGenerator: Abstract base class for entity generators
- ensure_context(): Resolve an optional context argument

Design Principles:
- The context owns the random source; generators never touch global
  random state, so a seeded context reproduces its output exactly
- Generators are stateless apart from the context they wrap
- The reference clock lives on the context so "today" is fixed for
  every collection generated from it
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import numpy as np

from ..config import GeneratorConfig
from ..static_pool import CustomerPool


@dataclass
class GeneratorContext:
    """
    Shared state for all generators.

    Attributes:
        rng: NumPy random generator; every draw goes through it
        now: Reference clock for "today", restock windows, expiry, alerts
        config: Draw ranges and probabilities
        seed: Seed the rng was built from, if any
        pool_seed: Seed for the Faker customer pool
    """

    rng: np.random.Generator
    now: datetime
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None
    pool_seed: int = 0

    # Built on first use; most generators never need customer strings
    _pool: CustomerPool | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        now: datetime | None = None,
        config: GeneratorConfig | None = None,
    ) -> "GeneratorContext":
        """
        Build a context.

        Args:
            seed: Seed for a fresh rng (ignored when rng is given)
            rng: Existing generator to draw from
            now: Reference clock (defaults to datetime.now())
            config: Generation parameters (defaults to GeneratorConfig())

        Returns:
            New GeneratorContext
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        pool_seed = seed if seed is not None else int(rng.integers(2**32))
        return cls(
            rng=rng,
            now=now or datetime.now(),
            config=config or GeneratorConfig(),
            seed=seed,
            pool_seed=pool_seed,
        )

    @property
    def pool(self) -> CustomerPool:
        """Faker customer pool, sampled with this context's rng."""
        if self._pool is None:
            self._pool = CustomerPool(
                seed=self.pool_seed, rng=self.rng, size=self.config.pool_size
            )
        return self._pool


def ensure_context(ctx: GeneratorContext | None) -> GeneratorContext:
    """Return ctx, or a fresh unseeded context when None."""
    return ctx if ctx is not None else GeneratorContext.create()


class BaseGenerator(ABC):
    """
    Abstract base class for entity generators.

    Subclasses implement generate(), drawing all randomness from
    self.rng and reading "today" from self.now.

    Example:
        class PerformanceGenerator(BaseGenerator):
            def generate(self) -> PerformanceMetrics:
                low, high = PERFORMANCE_KPI_BOUNDS["stock_accuracy"]
                ...
    """

    def __init__(self, ctx: GeneratorContext) -> None:
        """
        Initialize generator with shared context.

        Args:
            ctx: Shared GeneratorContext instance
        """
        self.ctx = ctx

    @abstractmethod
    def generate(self, *args: Any, **kwargs: Any) -> Any:
        """Generate this generator's collection or record."""
        pass

    @property
    def rng(self) -> np.random.Generator:
        """Convenience accessor for NumPy random generator."""
        return self.ctx.rng

    @property
    def config(self) -> GeneratorConfig:
        """Convenience accessor for generation parameters."""
        return self.ctx.config

    @property
    def now(self) -> datetime:
        """Convenience accessor for the reference clock."""
        return self.ctx.now
