"""Koma account API: app factory, store lifecycle and error rendering."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from koma_api.core.config import Settings, get_settings
from koma_api.core.errors import AccountError
from koma_api.core.logs import configure_logging
from koma_api.db.create_tables import create_all
from koma_api.db.session import get_engine
from koma_api.repositories.user_repository import SQLUserRepository, UserRepository
from koma_api.routers import auth as auth_router
from koma_api.routers import cart as cart_router
from koma_api.routers import health as health_router
from koma_api.routers import orders as orders_router
from koma_api.routers import users as users_router
from koma_api.routers import wishlist as wishlist_router
from koma_api.services.account_service import AccountService
from koma_api.services.cart_service import CartService
from koma_api.services.order_service import OrderService
from koma_api.services.wishlist_service import WishlistService

logger = logging.getLogger(__name__)


class InternalErrorMiddleware(BaseHTTPMiddleware):
    """Render anything the domain did not handle as 500 {"error": message}."""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse({"error": str(exc)}, status_code=500)


async def _account_error_handler(request: Request, exc: AccountError):
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {"message": "Invalid request payload", "details": jsonable_encoder(exc.errors())},
        status_code=400,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # tables and a store round-trip must succeed before requests are served
    create_all()
    app.state.repository.ping()
    app.state.ready = True
    logger.info("Store ready (%s)", get_engine().url.get_backend_name())
    try:
        yield
    finally:
        app.state.ready = False
        get_engine().dispose()


def create_app(settings: Optional[Settings] = None, repository: Optional[UserRepository] = None) -> FastAPI:
    """Factory compatible with uvicorn --factory."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title="Koma Account API", lifespan=lifespan)
    repository = repository or SQLUserRepository()
    app.state.settings = settings
    app.state.ready = False
    app.state.repository = repository
    app.state.account_service = AccountService(repository, settings)
    app.state.wishlist_service = WishlistService(repository, settings)
    app.state.order_service = OrderService(repository, settings)
    app.state.cart_service = CartService(repository, settings)

    app.add_exception_handler(AccountError, _account_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_middleware(InternalErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(health_router.router)
    app.include_router(auth_router.router)
    app.include_router(users_router.router)
    app.include_router(wishlist_router.router)
    app.include_router(orders_router.router)
    app.include_router(cart_router.router)
    logger.info("Save mode: %s", settings.save_mode)
    return app


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(create_app(_settings), host=_settings.host, port=_settings.port)
