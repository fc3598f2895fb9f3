"""Unit tests for roster.core.security: username/password rules and bcrypt hashing."""

import unittest

from roster.core.security import (
    hash_password,
    is_valid_password,
    is_valid_username,
    verify_password,
)


class TestUsernameRules(unittest.TestCase):
    def test_valid_usernames(self) -> None:
        for name in ("a", "alice", "bob-2", "0", "a" * 19, "-"):
            with self.subTest(name=name):
                self.assertTrue(is_valid_username(name))

    def test_invalid_usernames(self) -> None:
        for name in ("", "a" * 20, "Alice", "al ice", "al_ice", "élise", "bob!", "a\n"):
            with self.subTest(name=name):
                self.assertFalse(is_valid_username(name))


class TestPasswordRules(unittest.TestCase):
    def test_minimum_length(self) -> None:
        self.assertFalse(is_valid_password("1234567"))
        self.assertTrue(is_valid_password("12345678"))

    def test_length_is_counted_in_utf8_bytes(self) -> None:
        self.assertTrue(is_valid_password("\u00e9\u00e9\u00e9\u00e9"))
        self.assertFalse(is_valid_password("\u00e9\u00e9\u00e9"))


class TestHashing(unittest.TestCase):
    """hash_password salts randomly; verify_password checks against the stored hash."""

    def test_round_trip(self) -> None:
        hashed = hash_password("password1", rounds=4)
        self.assertTrue(verify_password("password1", hashed))
        self.assertFalse(verify_password("password2", hashed))

    def test_salted(self) -> None:
        self.assertNotEqual(hash_password("password1", rounds=4), hash_password("password1", rounds=4))

    def test_malformed_stored_hash_raises(self) -> None:
        with self.assertRaises(ValueError):
            verify_password("password1", "not-a-bcrypt-hash")


if __name__ == "__main__":
    unittest.main()
