# shop_server/core/errors.py

"""
Error taxonomy for the storefront API.

Services raise these; a single exception handler turns them into JSON
responses using `STATUS_CODES`. Every response body carries a `message`,
validation failures additionally carry an itemized `errors` list.
"""


class ShopError(Exception):
    message = "Something went wrong!"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(ShopError):
    message = "Validation failed"

    def __init__(self, errors: list[dict], message: str | None = None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class DuplicateUser(ShopError):
    message = "User already exists"


class UserNotFound(ShopError):
    message = "User not found"


class InvalidCredentials(ShopError):
    message = "Invalid credentials"


class MissingToken(ShopError):
    message = "No token provided"


class InvalidToken(ShopError):
    message = "Invalid token"


class ExpiredToken(InvalidToken):
    message = "Token expired"


class ServerError(ShopError):
    message = "Something went wrong!"


STATUS_CODES = {
    ValidationError: 400,
    DuplicateUser: 400,
    UserNotFound: 400,
    InvalidCredentials: 400,
    MissingToken: 401,
    InvalidToken: 403,
    ServerError: 500,
}


def status_for(exc: ShopError) -> int:
    # walk the MRO so subclasses (ExpiredToken) inherit their parent's status
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return 500
