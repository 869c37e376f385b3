"""Unit tests for portal.core.config.Settings validation."""

import unittest

from pydantic import SecretStr, ValidationError

from portal.core.config import DEFAULT_JWT_SECRET, Settings


class TestSettingsDefaults(unittest.TestCase):
    """Defaults match the institutional policy."""

    def test_policy_defaults(self) -> None:
        s = Settings()
        self.assertEqual(s.INSTITUTION_EMAIL_DOMAIN, "@rguktsklm.ac.in")
        self.assertEqual(s.FACULTY_POSITIONS, ["ao", "dean", "ada", "dsw"])
        self.assertEqual(s.PASSWORD_MIN_LENGTH, 8)
        self.assertEqual(s.BCRYPT_ROUNDS, 10)


class TestSettingsValidation(unittest.TestCase):
    """Out-of-range or unsafe values are rejected at startup."""

    def test_non_postgres_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://localhost/portal")

    def test_domain_must_start_with_at(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(INSTITUTION_EMAIL_DOMAIN="rguktsklm.ac.in")

    def test_empty_position_list(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(FACULTY_POSITIONS=[" "])

    def test_bcrypt_rounds_range(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=17)

    def test_min_length_cannot_exceed_bcrypt_limit(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(PASSWORD_MIN_LENGTH=73)

    def test_default_secret_rejected_in_prod(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(APP_ENV="prod", JWT_SECRET=SecretStr(DEFAULT_JWT_SECRET))

    def test_custom_secret_accepted_in_prod(self) -> None:
        s = Settings(APP_ENV="prod", JWT_SECRET=SecretStr("a-real-deployment-secret"))
        self.assertEqual(s.APP_ENV, "prod")
