"""Admin overlay: factor store, shared-secret session, factor editor."""

from compensacoes.admin.auth import AdminSession
from compensacoes.admin.panel import AdminMessage, AdminPanel
from compensacoes.admin.store import FactorStore

__all__ = ["AdminMessage", "AdminPanel", "AdminSession", "FactorStore"]
