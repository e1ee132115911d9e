# shop_server/core/users.py

import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from shop_server.core.errors import (
    DuplicateUser,
    InvalidCredentials,
    ServerError,
    UserNotFound,
)
from shop_server.core.security import PasswordHasher, TokenIssuer
from shop_server.models.user import User


logger = logging.getLogger(__name__)


class UserService:
    """
    Signup and signin orchestration.

    Inputs are expected to be validated already; every method makes a single
    attempt and surfaces failures to the caller. Store and hashing errors are
    reported as `ServerError` without internal detail.
    """

    def __init__(self, db: Session, hasher: PasswordHasher, tokens: TokenIssuer):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def signup(self, username: str, email: str, password: str) -> str:
        try:
            if self.find_by_email(email):
                raise DuplicateUser()

            user = User(username=username, email=email, password=self.hasher.hash(password))
            self.db.add(user)
            self.db.commit()
            user_id = user.id
        except IntegrityError:
            # lost a race with a concurrent signup for the same email
            self.db.rollback()
            raise DuplicateUser()
        except (SQLAlchemyError, ValueError) as e:
            self.db.rollback()
            logger.exception("Signup failed: %s", type(e).__name__)
            raise ServerError("Server error during signup") from e

        logger.info("User %s signed up", user_id)
        return self.tokens.issue(user_id)

    def signin(self, email: str, password: str) -> tuple[str, User]:
        try:
            user = self.find_by_email(email)
            if not user:
                raise UserNotFound()
            matches = self.hasher.verify(password, user.password)
        except (SQLAlchemyError, ValueError) as e:
            logger.exception("Signin failed: %s", type(e).__name__)
            raise ServerError("Server error during signin") from e

        if not matches:
            logger.warning("Rejected signin for user %s: bad password", user.id)
            raise InvalidCredentials()

        logger.info("User %s signed in", user.id)
        return self.tokens.issue(user.id), user

    def get_user(self, user_id: str) -> User:
        try:
            pk = int(user_id)
        except (TypeError, ValueError):
            raise UserNotFound()

        try:
            user = self.db.get(User, pk)
        except SQLAlchemyError as e:
            logger.exception("User lookup failed")
            raise ServerError() from e

        if user is None:
            raise UserNotFound()
        return user
