"""Unit tests for roster.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from roster.core.config import Settings


class TestSettingsValidation(unittest.TestCase):
    def test_accepts_postgres_and_sqlite_urls(self) -> None:
        for url in ("postgresql+psycopg2://u:p@db/roster", "postgres://u:p@db/roster", "sqlite://"):
            with self.subTest(url=url):
                self.assertEqual(Settings(DATABASE_URL=f" {url} ").DATABASE_URL, url)

    def test_rejects_other_database_urls(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://u:p@db/roster")

    def test_rejects_empty_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="  ")

    def test_bcrypt_rounds_bounds(self) -> None:
        self.assertEqual(Settings(BCRYPT_ROUNDS=4).BCRYPT_ROUNDS, 4)
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=32)

    def test_log_level_is_normalized(self) -> None:
        self.assertEqual(Settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            Settings(LOG_LEVEL="chatty")

    def test_cookie_max_age_must_be_positive(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(SESSION_COOKIE_MAX_AGE=0)


if __name__ == "__main__":
    unittest.main()
