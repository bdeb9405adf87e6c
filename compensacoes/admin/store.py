"""Factor configuration store.

Owns the single live CalculationFactors of a session. Every write goes to
the repository before returning, and get() reflects it immediately.
Calculators do not read the store: callers pass ``store.get()`` in.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from compensacoes.schemas.factors import DEFAULT_FACTORS, CalculationFactors, resolve_factor_key
from compensacoes.storage.repository import FactorRepository

logger = logging.getLogger(__name__)


class FactorStore:
    """Live factor configuration backed by a FactorRepository."""

    def __init__(self, repository: FactorRepository) -> None:
        self._repository = repository
        self._factors = self._load()

    def _load(self) -> CalculationFactors:
        document = self._repository.load()
        if document is None:
            logger.info("No persisted factors, using statutory defaults")
            return DEFAULT_FACTORS
        logger.info("Loaded persisted factors (%d keys)", len(document))
        return CalculationFactors.from_document(document)

    def get(self) -> CalculationFactors:
        """Current configuration."""
        return self._factors

    def update(self, key: str, value: Decimal | int | float) -> CalculationFactors:
        """Set one coefficient and persist the full configuration.

        Raises:
            UnknownFactorError: If the key is not a calculation factor.
            FactorStorageError: If the repository cannot be written.
        """
        name = resolve_factor_key(key)
        updated = self._factors.with_factor(name, value)
        self._repository.save(updated.to_document())
        self._factors = updated
        logger.info("Factor %s set to %s", name, getattr(updated, name))
        return updated

    def reset(self) -> CalculationFactors:
        """Restore statutory defaults and clear the persisted slot."""
        self._repository.clear()
        self._factors = DEFAULT_FACTORS
        logger.info("Factors reset to statutory defaults")
        return self._factors

    def reload(self) -> CalculationFactors:
        """Re-read the repository, merging over defaults."""
        self._factors = self._load()
        return self._factors
