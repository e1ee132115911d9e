# shop_server/main.py

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from shop_server.api import products, users
from shop_server.api.schemas import field_errors
from shop_server.config import CorsSettings, Settings, configure_logging, load_settings
from shop_server.core.errors import ShopError, ValidationError, status_for
from shop_server.core.security import PasswordHasher, TokenIssuer
from shop_server.database import Database


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # a missing DATABASE_URL / JWT_SECRET fails validation here and aborts startup
    settings = app.state.settings or load_settings()
    app.state.settings = settings
    configure_logging(settings.log_level)

    db = Database(settings.database_url)
    db.init_db()
    app.state.db = db
    app.state.hasher = PasswordHasher(settings.bcrypt_rounds)
    app.state.tokens = TokenIssuer(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    if not settings.products_require_auth:
        logger.warning("Product routes are not authenticated (PRODUCTS_REQUIRE_AUTH is off)")
    logger.info("Server ready")

    yield

    db.dispose()
    logger.info("Server stopped")


async def shop_error_handler(request: Request, exc: ShopError):
    return JSONResponse(status_code=status_for(exc), content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = field_errors(request.method, request.url.path, exc.errors())
    return await shop_error_handler(request, ValidationError(errors))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # routing errors (404 / 405) and any HTTPException raised by a dependency
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Something went wrong!"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API. `settings` is resolved from the environment at startup
    when not given.
    """
    app = FastAPI(title="Storefront API", lifespan=lifespan)
    app.state.settings = settings

    # middleware has to be in place before the lifespan runs
    origins = (settings or CorsSettings()).cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(users.router)
    app.include_router(products.router)
    return app


app = create_app()


def run():
    settings = load_settings()
    uvicorn.run(
        "shop_server.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
