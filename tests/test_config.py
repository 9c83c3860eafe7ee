"""Unit tests for app.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


class TestSettingsValidation(unittest.TestCase):
    def test_defaults_are_valid(self) -> None:
        s = Settings(DATABASE_URL="mysql+pymysql://u:p@localhost/powerdns")
        self.assertEqual(s.ADMIN_TEMPLATE_ID, 1)
        self.assertTrue(s.REGISTRATION_ENABLED)

    def test_rejects_unknown_database_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="oracle://u:p@localhost/db")

    def test_base_url_prefix_normalized(self) -> None:
        self.assertEqual(Settings(BASE_URL_PREFIX="/panel/").BASE_URL_PREFIX, "/panel")
        self.assertEqual(Settings(BASE_URL_PREFIX="").BASE_URL_PREFIX, "")

    def test_base_url_prefix_must_be_absolute(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(BASE_URL_PREFIX="panel")

    def test_password_cost_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(PASSWORD_COST=3)
        with self.assertRaises(ValidationError):
            Settings(PASSWORD_COST=32)

    def test_admin_template_id_positive(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(ADMIN_TEMPLATE_ID=0)

    def test_session_cookie_name_charset(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(SESSION_COOKIE_NAME="bad name;")


if __name__ == "__main__":
    unittest.main()
