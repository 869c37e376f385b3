"""Credential store: find/insert/update account rows by email over a SQLAlchemy session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from portal.services.errors import CredentialStoreError, DuplicateAccountError

if TYPE_CHECKING:
    from portal.services.variants import AccountVariant

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Storage adapter for Student and Faculty rows, keyed by email.

    Each call is a single statement plus commit; atomicity and email uniqueness
    come from the database (unique index on email), not from this class.
    All SQLAlchemy failures are re-raised as CredentialStoreError after rollback.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, variant: "AccountVariant", email: str) -> Any | None:
        """Return the account row for email, or None."""
        try:
            return self.session.execute(
                select(variant.model).where(variant.model.email == email)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise CredentialStoreError(f"{variant.name} lookup failed") from e

    def insert(self, variant: "AccountVariant", **fields: Any) -> Any:
        """Insert and return a new account row. DuplicateAccountError if the email is taken."""
        row = variant.model(**fields)
        self.session.add(row)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateAccountError(f"{variant.name} email already exists") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise CredentialStoreError(f"{variant.name} insert failed") from e
        self.session.refresh(row)
        return row

    def update(self, variant: "AccountVariant", email: str, **patch: Any) -> int:
        """Apply patch to the row with this email; return the number of rows updated."""
        row = self.find_by_email(variant, email)
        if row is None:
            return 0
        for key, value in patch.items():
            setattr(row, key, value)
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise CredentialStoreError(f"{variant.name} update failed") from e
        return 1

    def list_accounts(self, variant: "AccountVariant") -> list[Any]:
        """All rows of the variant ordered by id (insertion order)."""
        try:
            return list(
                self.session.execute(
                    select(variant.model).order_by(variant.model.id)
                ).scalars()
            )
        except SQLAlchemyError as e:
            self.session.rollback()
            raise CredentialStoreError(f"{variant.name} listing failed") from e
