"""Admin factor editor.

Couples the admin session with the factor store: logins produce the
user-visible messages shown in the overlay, edits are clamped to each
factor's domain before reaching the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from compensacoes.admin.auth import AdminSession
from compensacoes.admin.store import FactorStore
from compensacoes.errors import AdminAccessRequiredError
from compensacoes.inputs import clamp_factor
from compensacoes.schemas.factors import CalculationFactors

# Editor sections: (title, [(factor, label, is_rate)])
FACTOR_SECTIONS: tuple[tuple[str, tuple[tuple[str, str, bool], ...]], ...] = (
    (
        "ITA - Incapacidade Temporária",
        (
            ("ita_internamento_100", "Internamento (até ao limite)", True),
            ("ita_internamento_apos_30", "Internamento (após o limite)", True),
            ("ita_ambulatorio", "Ambulatório", True),
            ("ita_limite_dias_internamento", "Limite de dias de internamento", False),
            ("ita_divisor_remuneracao_diaria", "Divisor da remuneração diária", False),
        ),
    ),
    (
        "IPP - Incapacidade Permanente Parcial",
        (
            ("ipp_decreto_default", "Fator Decreto (padrão)", True),
            ("ipp_medico_default", "IPP Médico (padrão)", True),
        ),
    ),
    (
        "Pensão por Morte",
        (
            ("pensao_conjuge_reforma", "Cônjuge (reforma)", True),
            ("pensao_conjuge_normal", "Cônjuge (normal)", True),
            ("pensao_filho_1", "1 Filho", True),
            ("pensao_filhos_2", "2 Filhos", True),
            ("pensao_filhos_3_mais", "3+ Filhos", True),
            ("pensao_pais", "Pais (cada)", True),
        ),
    ),
    (
        "Subsídios",
        (
            ("subsidio_morte_multiplicador", "Subsídio Morte", False),
            ("subsidio_funeral_multiplicador", "Subsídio Funeral", False),
        ),
    ),
)


@dataclass(frozen=True)
class AdminMessage:
    """Toast-style message shown after an admin action."""

    title: str
    description: str
    success: bool = True


class AdminPanel:
    """Factor editor gated by an AdminSession."""

    def __init__(self, session: AdminSession, store: FactorStore) -> None:
        self._session = session
        self._store = store

    @property
    def is_admin(self) -> bool:
        return self._session.is_admin

    @property
    def factors(self) -> CalculationFactors:
        return self._store.get()

    def login(self, password: str) -> AdminMessage:
        if self._session.authenticate(password):
            return AdminMessage("Acesso concedido", "Bem-vindo ao painel de administração.")
        return AdminMessage("Acesso negado", "Palavra-passe incorreta.", success=False)

    def logout(self) -> AdminMessage:
        self._session.logout()
        return AdminMessage("Sessão terminada", "Saiu do modo administrador.")

    def set_factor(self, key: str, raw_value: Decimal | int | float | str) -> CalculationFactors:
        """Clamp an edited value to its domain and store it.

        Raises:
            AdminAccessRequiredError: Without an authenticated session.
            UnknownFactorError: If the key is not a calculation factor.
        """
        self._require_admin()
        return self._store.update(key, clamp_factor(key, raw_value))

    def reset_factors(self) -> AdminMessage:
        self._require_admin()
        self._store.reset()
        return AdminMessage("Valores repostos", "Todos os fatores voltaram aos valores originais.")

    def _require_admin(self) -> None:
        if not self._session.is_admin:
            raise AdminAccessRequiredError
