"""Unit tests for roster.services.auth.AuthState: lazy, memoized session resolution."""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

from roster.core.errors import CorruptDataError
from roster.core.tokens import SessionToken
from roster.models import PermissionLevel
from roster.services.auth import AuthState, AuthStatus


def _db_returning(row: object) -> MagicMock:
    """Mock session whose join query returns row."""
    db = MagicMock()
    db.query.return_value.join.return_value.filter.return_value.first.return_value = row
    return db


class TestFromCookie(unittest.TestCase):
    def test_missing_cookie_is_anonymous(self) -> None:
        state = AuthState.from_cookie(None)
        self.assertEqual(state.status, AuthStatus.ANONYMOUS)
        self.assertFalse(state.logged_in)

    def test_malformed_cookie_is_anonymous(self) -> None:
        for value in ("_", "abc", "-5", str(1 << 128)):
            with self.subTest(value=value):
                self.assertEqual(AuthState.from_cookie(value).status, AuthStatus.ANONYMOUS)

    def test_valid_cookie_is_unresolved(self) -> None:
        state = AuthState.from_cookie("99")
        self.assertEqual(state.status, AuthStatus.UNRESOLVED)
        self.assertTrue(state.logged_in)
        self.assertEqual(state.token, SessionToken(99))


class TestGetUser(unittest.TestCase):
    def test_anonymous_never_queries(self) -> None:
        db = MagicMock()
        state = AuthState()
        self.assertIsNone(state.get_user(db))
        self.assertFalse(state.is_admin(db))
        db.query.assert_not_called()
        self.assertEqual(state.status, AuthStatus.ANONYMOUS)

    def test_resolves_once_and_caches(self) -> None:
        db = _db_returning(SimpleNamespace(username="alice", permission_level=0))
        state = AuthState(SessionToken(5))

        first = state.get_user(db)
        second = state.get_user(db)

        self.assertEqual(first.username, "alice")
        self.assertIs(first, second)
        self.assertEqual(db.query.call_count, 1)
        self.assertEqual(state.status, AuthStatus.RESOLVED)

    def test_unknown_token_is_cached_too(self) -> None:
        db = _db_returning(None)
        state = AuthState(SessionToken(5))
        self.assertIsNone(state.get_user(db))
        self.assertIsNone(state.get_user(db))
        self.assertFalse(state.is_admin(db))
        self.assertEqual(db.query.call_count, 1)

    def test_is_admin(self) -> None:
        db = _db_returning(SimpleNamespace(username="root", permission_level=1))
        state = AuthState(SessionToken(5))
        self.assertTrue(state.is_admin(db))
        self.assertEqual(state.get_user(db).permission_level, PermissionLevel.ADMIN)

    def test_plain_user_is_not_admin(self) -> None:
        db = _db_returning(SimpleNamespace(username="alice", permission_level=0))
        self.assertFalse(AuthState(SessionToken(5)).is_admin(db))

    def test_is_user(self) -> None:
        db = _db_returning(SimpleNamespace(username="alice", permission_level=0))
        state = AuthState(SessionToken(5))
        self.assertTrue(state.is_user(db, "alice"))
        self.assertFalse(state.is_user(db, "bob"))
        self.assertEqual(db.query.call_count, 1)

    def test_corrupt_permission_level_raises(self) -> None:
        db = _db_returning(SimpleNamespace(username="alice", permission_level=3))
        with self.assertRaises(CorruptDataError):
            AuthState(SessionToken(5)).get_user(db)


if __name__ == "__main__":
    unittest.main()
