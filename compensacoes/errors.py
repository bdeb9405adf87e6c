"""Domain exceptions.

Calculators never raise: invalid periods are flags, out-of-range inputs are
clamped at entry. These cover the admin path and factor persistence.
"""

from __future__ import annotations


class SimulatorError(Exception):
    """Base class for simulator errors carrying a user-facing message."""

    def __init__(self, message: str, user_message: str) -> None:
        super().__init__(message)
        self.user_message = user_message


class UnknownFactorError(SimulatorError, KeyError):
    """Raised when a factor key is not part of CalculationFactors."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Unknown calculation factor: {key}",
            user_message="Fator de cálculo desconhecido.",
        )
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])


class AdminAccessRequiredError(SimulatorError):
    """Raised when a factor write is attempted without an admin session."""

    def __init__(self) -> None:
        super().__init__(
            "Admin session required to change calculation factors",
            user_message="Inicie sessão como administrador para editar os fatores.",
        )


class FactorStorageError(SimulatorError):
    """Raised when persisted factors cannot be written or cleared."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            user_message="Não foi possível guardar os fatores de cálculo.",
        )
