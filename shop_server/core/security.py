# shop_server/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from shop_server.core.errors import ExpiredToken, InvalidToken


logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 10
ACCESS_TOKEN_EXPIRE_MINUTES = 60


class PasswordHasher:
    """
    Salted bcrypt hashing with a fixed cost factor.
    Library errors (e.g. a malformed stored hash) propagate to the caller.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return self.pwd_context.verify(plain_password, hashed_password)


class TokenIssuer:
    """
    Issues and verifies signed bearer tokens carrying a user id.

    Tokens are stateless: they stop being valid only when `exp` passes or the
    signing secret changes. The server's UTC clock is authoritative and no
    leeway is applied.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    ):
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, user_id, expires_delta: timedelta | None = None) -> str:
        if expires_delta is None:
            expires_delta = self.expires_delta
        expire = datetime.now(timezone.utc) + expires_delta
        to_encode = {"id": str(user_id), "exp": expire}
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> str:
        if not token:
            raise InvalidToken()
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError:
            raise ExpiredToken()
        except JWTError as e:
            logger.debug("Token rejected: %s", e)
            raise InvalidToken()

        user_id = payload.get("id")
        if not user_id:
            raise InvalidToken()
        return str(user_id)
