"""
Warung POS - FastAPI application

Single entry point for the register's HTTP API.
"""
from fastapi import FastAPI

from warung_pos.logging import get_logger
from warung_pos.routers import cart_router, products_router, transactions_router

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build the API app with cart, catalog and history routes."""
    app = FastAPI(title="Warung POS")
    app.include_router(cart_router)
    app.include_router(products_router)
    app.include_router(transactions_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    logger.info("Register API ready")
    return app


app = create_app()
