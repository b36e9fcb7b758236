"""
CustomerPool - Pre-generated Faker data sampled with the context rng.

Order generation needs a customer name, email and shipping address per
order. Rather than calling Faker per row, the pool pre-generates each
list once from a seeded Faker instance and then samples by index with
the injected NumPy generator, so output is reproducible from the seed.

Usage:
    pool = CustomerPool(seed=42, rng=np.random.default_rng(42))
    names = pool.sample_names(10)
    name, email, address = pool.sample_customer()
"""

from __future__ import annotations

import logging

import numpy as np
from faker import Faker

logger = logging.getLogger(__name__)


class CustomerPool:
    """
    Pre-generated pool of Faker customer data.

    Attributes:
        seed: Faker seed used to build the pools
        names: Pool of full names
        emails: Pool of email addresses
        addresses: Pool of single-line shipping addresses
    """

    def __init__(
        self,
        seed: int,
        rng: np.random.Generator,
        size: int = 500,
        locale: str = "en_US",
    ) -> None:
        """
        Build all pools.

        Args:
            seed: Seed for the Faker instance
            rng: Generator used for sampling (normally the context rng)
            size: Entries per pool
            locale: Faker locale
        """
        self.seed = seed
        self._rng = rng

        self._faker = Faker(locale)
        self._faker.seed_instance(seed)

        self.names: list[str] = self._generate_pool(self._faker.name, size)
        self.emails: list[str] = self._generate_pool(self._faker.email, size)
        self.addresses: list[str] = self._generate_pool(self._single_line_address, size)
        logger.debug("Built customer pool (seed=%d, size=%d)", seed, size)

    def _single_line_address(self) -> str:
        return f"{self._faker.street_address()}, {self._faker.city()}"

    def _generate_pool(self, generator_func, size: int) -> list[str]:
        """
        Generate a pool of values, preferring unique ones.

        Falls back to duplicates if uniqueness cannot be reached within
        3x attempts.
        """
        pool: list[str] = []
        seen: set[str] = set()
        max_attempts = size * 3
        attempts = 0

        while len(pool) < size and attempts < max_attempts:
            value = generator_func()
            if value not in seen:
                seen.add(value)
                pool.append(value)
            attempts += 1

        while len(pool) < size:
            pool.append(generator_func())

        return pool

    def _sample_from_pool(self, pool: list[str], n: int) -> list[str]:
        if n == 0:
            return []
        indices = self._rng.integers(len(pool), size=n)
        return [pool[i] for i in indices]

    def sample_names(self, n: int) -> list[str]:
        """Sample n full names."""
        return self._sample_from_pool(self.names, n)

    def sample_emails(self, n: int) -> list[str]:
        """Sample n email addresses."""
        return self._sample_from_pool(self.emails, n)

    def sample_addresses(self, n: int) -> list[str]:
        """Sample n shipping addresses."""
        return self._sample_from_pool(self.addresses, n)

    def sample_customer(self) -> tuple[str, str, str]:
        """Sample one (name, email, address) triple."""
        return (
            self.sample_names(1)[0],
            self.sample_emails(1)[0],
            self.sample_addresses(1)[0],
        )
