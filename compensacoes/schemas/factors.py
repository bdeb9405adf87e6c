"""Calculation factors — the tunable coefficients behind every calculator.

Statutory defaults:
  ITA     internamento 100% for the first 30 days, 75% afterwards,
          ambulatório 65%, daily remuneration = reference / 30
  IPP     fator decreto 70%, IPP médico 50% (form default)
  Morte   cônjuge 40% (idade de reforma) / 30%, filhos 20% / 40% / 60%,
          pais 10% each, subsídio por morte 6x, subsídio de funeral 2x

The persisted document is a flat camelCase key → number mapping, merged over
the defaults on load. Unknown keys are ignored, missing keys keep defaults.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from compensacoes.errors import UnknownFactorError

logger = logging.getLogger(__name__)


class CalculationFactors(BaseModel):
    """Fixed-shape set of calculation coefficients.

    Rates are fractions in [0, 1]; day limits, divisors and subsidy
    multipliers are non-negative integers. No clamping happens here:
    calculators trust whatever configuration they receive.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # ITA
    ita_internamento_100: Decimal = Field(default=Decimal("1.0"), alias="itaInternamento100")
    ita_internamento_apos_30: Decimal = Field(default=Decimal("0.75"), alias="itaInternamentoApos30")
    ita_ambulatorio: Decimal = Field(default=Decimal("0.65"), alias="itaAmbulatorio")
    ita_limite_dias_internamento: int = Field(default=30, alias="itaLimiteDiasInternamento")
    ita_divisor_remuneracao_diaria: int = Field(default=30, alias="itaDivisorRemuneracaoDiaria")

    # IPP
    ipp_decreto_default: Decimal = Field(default=Decimal("0.7"), alias="ippDecretoDefault")
    ipp_medico_default: Decimal = Field(default=Decimal("0.5"), alias="ippMedicoDefault")

    # Pensão por morte
    pensao_conjuge_reforma: Decimal = Field(default=Decimal("0.4"), alias="pensaoConjugeReforma")
    pensao_conjuge_normal: Decimal = Field(default=Decimal("0.3"), alias="pensaoConjugeNormal")
    pensao_filho_1: Decimal = Field(default=Decimal("0.2"), alias="pensaoFilho1")
    pensao_filhos_2: Decimal = Field(default=Decimal("0.4"), alias="pensaoFilhos2")
    pensao_filhos_3_mais: Decimal = Field(default=Decimal("0.6"), alias="pensaoFilhos3Mais")
    pensao_pais: Decimal = Field(default=Decimal("0.1"), alias="pensaoPais")

    # Subsídios
    subsidio_morte_multiplicador: int = Field(default=6, alias="subsidioMorteMultiplicador")
    subsidio_funeral_multiplicador: int = Field(default=2, alias="subsidioFuneralMultiplicador")

    @classmethod
    def from_document(cls, document: Mapping[str, Any] | None) -> CalculationFactors:
        """Merge a persisted document over the statutory defaults.

        Accepts camelCase (persisted) or snake_case keys. Unknown keys and
        non-numeric or non-finite values are skipped; the default stays in
        place.
        """
        if not document:
            return cls()

        values: dict[str, Decimal | int] = {}
        for raw_key, raw_value in document.items():
            name = _ALIAS_TO_NAME.get(raw_key, raw_key)
            if name not in _FIELD_NAMES:
                continue
            if isinstance(raw_value, bool) or not isinstance(raw_value, int | float | str | Decimal):
                logger.warning("Ignoring non-numeric persisted factor %s=%r", raw_key, raw_value)
                continue
            try:
                value = coerce_factor_value(name, raw_value)
            except (ArithmeticError, ValueError):
                logger.warning("Ignoring unparseable persisted factor %s=%r", raw_key, raw_value)
                continue
            if isinstance(value, Decimal) and not value.is_finite():
                logger.warning("Ignoring non-finite persisted factor %s=%r", raw_key, raw_value)
                continue
            values[name] = value
        return cls(**values)

    def to_document(self) -> dict[str, float | int]:
        """Full configuration as a flat camelCase key → JSON number mapping."""
        document: dict[str, float | int] = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            document[field.alias or name] = float(value) if isinstance(value, Decimal) else int(value)
        return document

    def __getitem__(self, key: str) -> Decimal | int:
        return getattr(self, resolve_factor_key(key))

    def with_factor(self, key: str, value: float | int | Decimal) -> CalculationFactors:
        """Return a copy with a single coefficient replaced."""
        name = resolve_factor_key(key)
        return self.model_copy(update={name: coerce_factor_value(name, value)})


_FIELD_NAMES: frozenset[str] = frozenset(CalculationFactors.model_fields)
_ALIAS_TO_NAME: dict[str, str] = {
    field.alias: name for name, field in CalculationFactors.model_fields.items() if field.alias
}

# Factors that are whole numbers (days, divisors, multipliers) rather than rates
INTEGER_FACTORS: frozenset[str] = frozenset({
    "ita_limite_dias_internamento",
    "ita_divisor_remuneracao_diaria",
    "subsidio_morte_multiplicador",
    "subsidio_funeral_multiplicador",
})
RATE_FACTORS: frozenset[str] = _FIELD_NAMES - INTEGER_FACTORS

DEFAULT_FACTORS = CalculationFactors()


def resolve_factor_key(key: str) -> str:
    """Map a camelCase or snake_case key to the field name.

    Raises:
        UnknownFactorError: If the key is not a calculation factor.
    """
    if key in _FIELD_NAMES:
        return key
    name = _ALIAS_TO_NAME.get(key)
    if name is None:
        raise UnknownFactorError(key)
    return name


def is_rate_factor(key: str) -> bool:
    """True for [0, 1] rates, False for integer thresholds and multipliers."""
    return resolve_factor_key(key) in RATE_FACTORS


def coerce_factor_value(name: str, value: float | int | str | Decimal) -> Decimal | int:
    """Convert a raw number to the field's type (Decimal rate or int)."""
    if name in INTEGER_FACTORS:
        return int(Decimal(str(value)))
    return Decimal(str(value))
