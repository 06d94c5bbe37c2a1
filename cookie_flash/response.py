from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse, Response
from starlette.background import BackgroundTask
from starlette.datastructures import MutableHeaders
from starlette.types import Receive, Scope, Send

from cookie_flash.codec import encode
from cookie_flash.errors import EncodeError
from cookie_flash.extensions import response_extensions
from cookie_flash.logger import log_action, log_error

T = TypeVar("T")


@dataclass(frozen=True)
class StagedPayload:
    """Закодированное сообщение, ожидающее записи в куку. Живет в мешке ответа."""

    value: str


def to_response(inner: Any) -> Response:
    """Строит ответ из произвольного значения, как FastAPI делает для хендлеров."""
    if isinstance(inner, Response):
        return inner
    if isinstance(inner, str):
        return PlainTextResponse(inner)
    if isinstance(inner, bytes):
        return Response(inner)
    return JSONResponse(jsonable_encoder(inner))


class FlashResponse(Response, Generic[T]):
    """
    Ответ с необязательным flash-сообщением.

    Наследуется от Response, чтобы FastAPI отдавал его как есть. Статус, заголовки
    и тело берутся у внутреннего ответа. Саму куку пишет FlashMiddleware:
    здесь сообщение только кодируется и кладется в мешок ответа.
    """

    def __init__(self, message: Optional[T], inner: Any, type_: Any = Any):
        # Response.__init__ не вызываем: все атрибуты проксируются во внутренний ответ
        self._message = message
        self._inner = inner
        self._response: Optional[Response] = None
        self.type_ = type_

    @classmethod
    def with_redirect(cls, message: T, location: str, type_: Any = Any) -> "FlashResponse[T]":
        """Классика post-redirect-get: 303 See Other + сообщение."""
        return cls(message, RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER), type_=type_)

    @property
    def message(self) -> Optional[T]:
        return self._message

    @property
    def response(self) -> Response:
        if self._response is None:
            self._response = to_response(self._inner)
        return self._response

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return self.response.status_code

    @property
    def body(self) -> bytes:  # type: ignore[override]
        return self.response.body

    @property
    def raw_headers(self) -> list[tuple[bytes, bytes]]:  # type: ignore[override]
        return self.response.raw_headers

    @property
    def headers(self) -> MutableHeaders:
        return self.response.headers

    @property
    def background(self) -> Optional[BackgroundTask]:  # type: ignore[override]
        return self.response.background

    @background.setter
    def background(self, value: Optional[BackgroundTask]) -> None:
        self.response.background = value

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        # Сообщение используется не больше одного раза
        message, self._message = self._message, None
        response = self.response

        if message is not None:
            try:
                staged = encode(message, self.type_)
            except EncodeError as e:
                log_error("CARRIER", str(e))
                raise
            response_extensions(scope).insert(StagedPayload(staged))
            log_action("CARRIER", "STAGED", f"{len(staged)} chars for {scope.get('path', '?')}")

        await response(scope, receive, send)
