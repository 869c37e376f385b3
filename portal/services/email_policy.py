"""Institutional email policy: domain suffix for everyone, position allow-list for faculty."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from portal.services.errors import AccountValidationError, Reason

if TYPE_CHECKING:
    from portal.core.config import Settings

logger = logging.getLogger(__name__)


def invalid_domain_message(domain: str) -> str:
    """User-facing rejection text naming the accepted suffix."""
    return f"Invalid email domain. Only '{domain}' emails are allowed."


def has_institution_domain(email: str | None, domain: str) -> bool:
    """True when email is present and ends with the institutional suffix (case-sensitive)."""
    return bool(email) and email.endswith(domain)


def validate_email_domain(email: str | None, settings: "Settings") -> None:
    """Raise AccountValidationError(INVALID_DOMAIN) unless email carries the institution suffix."""
    domain = settings.INSTITUTION_EMAIL_DOMAIN
    if not has_institution_domain(email, domain):
        raise AccountValidationError(Reason.INVALID_DOMAIN, invalid_domain_message(domain))


def local_part(email: str) -> str:
    """Substring before the first '@'."""
    return email.split("@", 1)[0]


def derive_position(email: str, allowed: Iterable[str]) -> str | None:
    """
    Return the faculty position encoded in the email local part, or None when it is
    not in the allow-list. Exact, case-sensitive match: "Dean@..." is not "dean".
    """
    if "@" not in email:
        return None
    position = local_part(email)
    if position in set(allowed):
        logger.debug("Valid position: %s", position)
        return position
    logger.debug("Invalid position: %s", position)
    return None


def is_allowed_position(email: str, allowed: Iterable[str]) -> bool:
    return derive_position(email, allowed) is not None
