"""Test fixtures"""
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from cookie_flash.main import create_app
from cookie_flash.message import get_message
from cookie_flash.response import FlashResponse


def _add_test_routes(app: FastAPI) -> None:
    """Ручки, которых нет в демо: перезапись сообщения и падение хендлера."""

    @app.get("/refresh")
    async def refresh(request: Request):
        return FlashResponse("Second message", PlainTextResponse("refreshed"), type_=str)

    @app.get("/plain")
    async def plain():
        return PlainTextResponse("nothing to flash")

    @app.get("/peek")
    async def peek(request: Request):
        # Прочитали сообщение, но нового не кладем
        return PlainTextResponse(get_message(request, str).into_inner())

    @app.get("/boom")
    async def boom():
        raise RuntimeError("handler failed")


@pytest.fixture(name="app")
def app_fixture() -> FastAPI:
    app = create_app()
    _add_test_routes(app)
    return app


@pytest.fixture(name="client")
def client_fixture(app: FastAPI):
    with TestClient(app, follow_redirects=False) as client:
        yield client
