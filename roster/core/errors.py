"""Application errors rendered as HTML error pages by the exception handlers in main."""

from fastapi import status


class RosterError(Exception):
    """Base error carrying the user-facing message and the HTTP status to answer with."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# Signup


class SignupError(RosterError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidUsername(SignupError):
    default_message = "Invalid username"


class UsernameExists(SignupError):
    default_message = "Username already exists"


class PasswordsDoNotMatch(SignupError):
    default_message = "Passwords do not match"


class InvalidPassword(SignupError):
    default_message = "Invalid Password"


class InternalError(SignupError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Error"


# Login


class LoginError(RosterError):
    status_code = status.HTTP_401_UNAUTHORIZED


class UserDoesNotExist(LoginError):
    default_message = "User does not exist"


class WrongPassword(LoginError):
    default_message = "Wrong password"


# Access


class NotLoggedIn(RosterError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not logged in"


class NotAdmin(RosterError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not an admin"


class NoUser(RosterError):
    """Raised when a profile page is requested for an unknown username."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"could not find user '{username}'")


class CorruptDataError(RosterError):
    """Raised when a stored value cannot be decoded (e.g. an unknown permission level)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__()
