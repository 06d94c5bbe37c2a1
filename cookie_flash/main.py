from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from cookie_flash.api import demo
from cookie_flash.config import settings
from cookie_flash.logger import logger, setup_logging
from cookie_flash.middleware import FlashMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    setup_logging()
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started, flash cookie: '{settings.FLASH_COOKIE_NAME}'")
    yield
    logger.info(f"{settings.PROJECT_NAME} stopped")


def create_app(cookie_name: Optional[str] = None) -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.add_middleware(FlashMiddleware, cookie_name=cookie_name)
    app.include_router(demo.router, tags=["Flash"])
    return app


app = create_app()

# Запуск: uvicorn cookie_flash.main:app --reload
