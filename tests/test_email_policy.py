"""Unit tests for portal.services.email_policy: domain suffix and faculty positions."""

import unittest

from _support import make_settings

from portal.services.email_policy import (
    derive_position,
    has_institution_domain,
    is_allowed_position,
    validate_email_domain,
)
from portal.services.errors import AccountValidationError, Reason

DOMAIN = "@rguktsklm.ac.in"
POSITIONS = ["ao", "dean", "ada", "dsw"]


class TestInstitutionDomain(unittest.TestCase):
    """Only addresses ending with the institutional suffix are accepted."""

    def test_institution_address_accepted(self) -> None:
        self.assertTrue(has_institution_domain("john@rguktsklm.ac.in", DOMAIN))

    def test_other_domain_rejected(self) -> None:
        self.assertFalse(has_institution_domain("john@gmail.com", DOMAIN))

    def test_missing_email_rejected(self) -> None:
        self.assertFalse(has_institution_domain(None, DOMAIN))
        self.assertFalse(has_institution_domain("", DOMAIN))

    def test_suffix_is_case_sensitive(self) -> None:
        self.assertFalse(has_institution_domain("john@RGUKTSKLM.AC.IN", DOMAIN))

    def test_validate_raises_invalid_domain(self) -> None:
        with self.assertRaises(AccountValidationError) as ctx:
            validate_email_domain("john@gmail.com", make_settings())
        self.assertEqual(ctx.exception.reason, Reason.INVALID_DOMAIN)
        self.assertEqual(
            ctx.exception.message,
            "Invalid email domain. Only '@rguktsklm.ac.in' emails are allowed.",
        )

    def test_validate_passes_institution_address(self) -> None:
        validate_email_domain("s190001@rguktsklm.ac.in", make_settings())


class TestFacultyPosition(unittest.TestCase):
    """Faculty position is the email local part and must be in the allow-list."""

    def test_each_allowed_position(self) -> None:
        for position in POSITIONS:
            with self.subTest(position=position):
                self.assertEqual(derive_position(f"{position}{DOMAIN}", POSITIONS), position)

    def test_unknown_local_part(self) -> None:
        self.assertIsNone(derive_position(f"xyz{DOMAIN}", POSITIONS))
        self.assertFalse(is_allowed_position(f"xyz{DOMAIN}", POSITIONS))

    def test_match_is_case_sensitive(self) -> None:
        self.assertIsNone(derive_position(f"Dean{DOMAIN}", POSITIONS))

    def test_address_without_at_sign(self) -> None:
        self.assertIsNone(derive_position("dean", POSITIONS))
