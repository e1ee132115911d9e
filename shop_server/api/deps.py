# shop_server/api/deps.py

"""
Request pipeline for authentication.

Each step either hands its result to the next one or short-circuits the
request by raising a `ShopError`:

    bearer_token -> require_user_id -> route

`bearer_token` only extracts the credential; `require_user_id` verifies it and
records the caller on `request.state.user_id`. The user record is never loaded
here, routes that need it fetch it themselves.
"""

import logging
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from shop_server.core.errors import InvalidToken, MissingToken
from shop_server.core.products import ProductService
from shop_server.core.users import UserService
from shop_server.database import get_db


logger = logging.getLogger(__name__)


def bearer_token(request: Request) -> str | None:
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_user_id(request: Request, token: str | None = Depends(bearer_token)) -> str:
    if token is None:
        logger.warning("Rejected %s %s: no token", request.method, request.url.path)
        raise MissingToken()
    try:
        user_id = request.app.state.tokens.verify(token)
    except InvalidToken as e:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, e.message)
        raise
    request.state.user_id = user_id
    return user_id


def products_guard(request: Request, token: str | None = Depends(bearer_token)) -> str | None:
    """
    Product routes are open unless PRODUCTS_REQUIRE_AUTH is enabled, in which
    case they go through the same check as every other protected route.
    """
    if not request.app.state.settings.products_require_auth:
        return None
    return require_user_id(request, token)


def get_user_service(request: Request, db: Session = Depends(get_db)) -> UserService:
    state = request.app.state
    return UserService(db, state.hasher, state.tokens)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)
