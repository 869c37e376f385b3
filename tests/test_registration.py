"""Tests for portal.services.registration: policy checks and account creation."""

import unittest
from unittest.mock import MagicMock, patch

from _support import make_session_factory, make_settings

from portal.core.security import verify_password
from portal.services.credential_store import CredentialStore
from portal.services.errors import (
    AccountError,
    AccountValidationError,
    ConflictError,
    CredentialStoreError,
    InternalError,
    Reason,
)
from portal.services.registration import register
from portal.services.variants import FACULTY, STUDENT


class RegistrationTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.session = make_session_factory()()
        self.store = CredentialStore(self.session)
        self.settings = make_settings()

    def tearDown(self) -> None:
        self.session.close()

    def assertRejected(self, reason: Reason, **kwargs: object) -> AccountError:
        with self.assertRaises(AccountError) as ctx:
            register(self.store, kwargs.pop("variant", STUDENT), self.settings, **kwargs)
        self.assertEqual(ctx.exception.reason, reason)
        return ctx.exception


class TestStudentRegistration(RegistrationTestCase):
    """Student accounts: domain, uniqueness, length, representative flag."""

    def test_creates_account_with_hashed_password(self) -> None:
        message = register(
            self.store, STUDENT, self.settings,
            email="s190001@rguktsklm.ac.in", password="longenough1", user_name="John",
        )
        self.assertEqual(message, "Student email registration is successful")
        row = self.store.find_by_email(STUDENT, "s190001@rguktsklm.ac.in")
        self.assertNotEqual(row.password_hash, "longenough1")
        self.assertTrue(verify_password("longenough1", row.password_hash))
        self.assertEqual(row.user_name, "John")
        self.assertFalse(row.is_representative)

    def test_representative_flag_persisted(self) -> None:
        register(
            self.store, STUDENT, self.settings,
            email="rep@rguktsklm.ac.in", password="longenough1", user_name="Rep",
            is_representative=True,
        )
        self.assertTrue(self.store.find_by_email(STUDENT, "rep@rguktsklm.ac.in").is_representative)

    def test_wrong_domain(self) -> None:
        exc = self.assertRejected(
            Reason.INVALID_DOMAIN, email="john@gmail.com", password="longenough1", user_name="John"
        )
        self.assertIsInstance(exc, AccountValidationError)
        self.assertEqual(self.store.list_accounts(STUDENT), [])

    def test_missing_fields_listed(self) -> None:
        exc = self.assertRejected(Reason.MISSING_FIELDS, email=None, password="", user_name="John")
        self.assertEqual(exc.message, "Missing required fields: email, password")

    def test_short_password(self) -> None:
        exc = self.assertRejected(
            Reason.WEAK_PASSWORD, email="s1@rguktsklm.ac.in", password="short77", user_name="S"
        )
        self.assertEqual(exc.message, "Password is too short")

    def test_eight_characters_is_enough(self) -> None:
        register(
            self.store, STUDENT, self.settings,
            email="s1@rguktsklm.ac.in", password="12345678", user_name="S",
        )

    def test_password_over_72_bytes(self) -> None:
        exc = self.assertRejected(
            Reason.WEAK_PASSWORD, email="s1@rguktsklm.ac.in", password="x" * 73, user_name="S"
        )
        self.assertEqual(exc.message, "Password must be at most 72 bytes")

    def test_multibyte_password_limit_is_in_bytes(self) -> None:
        self.assertRejected(
            Reason.WEAK_PASSWORD, email="s1@rguktsklm.ac.in", password="\u00e9" * 37, user_name="S"
        )
        register(
            self.store, STUDENT, self.settings,
            email="s2@rguktsklm.ac.in", password="x" * 72, user_name="S",
        )

    def test_duplicate_email(self) -> None:
        kwargs = dict(email="s1@rguktsklm.ac.in", password="longenough1", user_name="S")
        register(self.store, STUDENT, self.settings, **kwargs)
        exc = self.assertRejected(Reason.DUPLICATE_EMAIL, **kwargs)
        self.assertIsInstance(exc, ConflictError)
        self.assertEqual(exc.message, "Student email is already registered")
        self.assertEqual(len(self.store.list_accounts(STUDENT)), 1)

    def test_concurrent_duplicate_caught_by_unique_index(self) -> None:
        kwargs = dict(email="s1@rguktsklm.ac.in", password="longenough1", user_name="S")
        register(self.store, STUDENT, self.settings, **kwargs)
        # The other request's lookup ran before this row existed.
        with patch.object(self.store, "find_by_email", return_value=None):
            exc = self.assertRejected(Reason.DUPLICATE_EMAIL, **kwargs)
        self.assertIsInstance(exc, ConflictError)
        self.assertEqual(len(self.store.list_accounts(STUDENT)), 1)

    def test_storage_failure_is_internal_error(self) -> None:
        store = MagicMock()
        store.find_by_email.side_effect = CredentialStoreError("down")
        with self.assertRaises(InternalError) as ctx:
            register(
                store, STUDENT, self.settings,
                email="s1@rguktsklm.ac.in", password="longenough1", user_name="S",
            )
        self.assertEqual(ctx.exception.message, "Failed to register student")
        store.insert.assert_not_called()


class TestFacultyRegistration(RegistrationTestCase):
    """Faculty accounts: position derived from the email local part."""

    def test_allowed_position(self) -> None:
        message = register(
            self.store, FACULTY, self.settings,
            email="ao@rguktsklm.ac.in", password="longenough1", user_name="Dr. A",
        )
        self.assertEqual(message, "Faculty email registration successful")
        row = self.store.find_by_email(FACULTY, "ao@rguktsklm.ac.in")
        self.assertEqual(row.position, "ao")
        self.assertFalse(hasattr(row, "is_representative"))

    def test_unknown_position(self) -> None:
        exc = self.assertRejected(
            Reason.INVALID_POSITION, variant=FACULTY,
            email="xyz@rguktsklm.ac.in", password="longenough1", user_name="X",
        )
        self.assertEqual(exc.message, "Invalid faculty email")
        self.assertEqual(self.store.list_accounts(FACULTY), [])

    def test_representative_flag_ignored(self) -> None:
        register(
            self.store, FACULTY, self.settings,
            email="dean@rguktsklm.ac.in", password="longenough1", user_name="Dean",
            is_representative=True,
        )
        self.assertEqual(self.store.find_by_email(FACULTY, "dean@rguktsklm.ac.in").position, "dean")

    def test_duplicate_message(self) -> None:
        kwargs = dict(variant=FACULTY, email="dsw@rguktsklm.ac.in", password="longenough1", user_name="D")
        register(self.store, FACULTY, self.settings, **{k: v for k, v in kwargs.items() if k != "variant"})
        exc = self.assertRejected(Reason.DUPLICATE_EMAIL, **kwargs)
        self.assertEqual(exc.message, "Faculty email already exists")

    def test_same_email_allowed_in_both_variants(self) -> None:
        kwargs = dict(email="ada@rguktsklm.ac.in", password="longenough1", user_name="A")
        register(self.store, FACULTY, self.settings, **kwargs)
        register(self.store, STUDENT, self.settings, **kwargs)
