"""Single shared-secret admin session.

One static password from settings, compared verbatim. No lockout, no
timeout, no per-user scoping: the flag lives as long as the session object.
"""

from __future__ import annotations

import logging
import secrets

logger = logging.getLogger(__name__)


class AdminSession:
    """Session-scoped admin flag gated by a shared secret."""

    def __init__(self, secret: str) -> None:
        self._secret = secret
        self._is_admin = False

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    def authenticate(self, candidate: str) -> bool:
        """Compare the submitted text with the shared secret.

        Returns True and sets the admin flag on a match; returns False
        otherwise (an empty configured secret never matches).
        """
        if not self._secret:
            logger.warning("Admin secret not configured, login refused")
            return False

        ok = secrets.compare_digest(
            (candidate or "").encode("utf-8"),
            self._secret.encode("utf-8"),
        )
        if ok:
            self._is_admin = True
            logger.info("Admin session started")
        else:
            logger.warning("Admin login failed")
        return ok

    def logout(self) -> None:
        if self._is_admin:
            logger.info("Admin session ended")
        self._is_admin = False
