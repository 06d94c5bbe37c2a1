"""
FlashMiddleware - жизненный цикл flash-куки.

Порядок строго такой:
  1. на входе кладем найденную куку в мешок запроса (ничего не трогаем);
  2. ждем хендлер;
  3. на выходе смотрим, подготовил ли ответ новое сообщение, и через CookieJar
     считаем дельту: новая кука, удаление старой или ничего.
Если хендлер упал, исключение летит дальше и куки не трогаются.
"""
from enum import Enum
from http.cookies import CookieError
from typing import Any, MutableMapping, Optional

from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request, cookie_parser
from starlette.responses import Response
from starlette.types import ASGIApp

from cookie_flash.config import settings
from cookie_flash.errors import HeaderConstructionError
from cookie_flash.extensions import begin_cycle
from cookie_flash.jar import Cookie, CookieJar, FlashCookie
from cookie_flash.logger import log_action, log_error
from cookie_flash.response import StagedPayload


class CookieState(str, Enum):
    NO_COOKIE = "no_cookie"
    COOKIE_PRESENT = "cookie_present"


class Outcome(str, Enum):
    REFRESHED = "refreshed"  # записана новая кука, старая перекрыта
    EXPIRED = "expired"      # старая кука удалена, новой нет
    UNTOUCHED = "untouched"  # не было ни куки, ни сообщения


def resolve_outcome(staged: Optional[str], state: CookieState) -> Outcome:
    if staged is not None:
        return Outcome.REFRESHED
    if state is CookieState.COOKIE_PRESENT:
        return Outcome.EXPIRED
    return Outcome.UNTOUCHED


class FlashMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, cookie_name: Optional[str] = None):
        super().__init__(app)
        if cookie_name is None:
            cookie_name = settings.FLASH_COOKIE_NAME
        if not cookie_name:
            raise HeaderConstructionError("Flash cookie name must not be empty")
        # Имя фиксируется один раз и дальше только читается
        self._cookie_name = cookie_name

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def _read_cookie(self, scope: MutableMapping[str, Any]) -> Optional[str]:
        """Читает куку прямо из заголовков запроса, мимо кеша Request.cookies."""
        return cookie_parser(Headers(scope=scope).get("cookie", "")).get(self._cookie_name)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_bag, response_bag = begin_cycle(request.scope)

        incoming = self._read_cookie(request.scope)
        if incoming is not None:
            request_bag.insert(FlashCookie(self._cookie_name, incoming))

        response = await call_next(request)

        staged = response_bag.get(StagedPayload)
        # Перечитываем из запроса, а не из мешка: хендлер мог куку проигнорировать
        original = self._read_cookie(request.scope)
        state = CookieState.COOKIE_PRESENT if original is not None else CookieState.NO_COOKIE

        jar = CookieJar()
        if original is not None:
            jar.add_original(Cookie(self._cookie_name, original))
        if staged is not None:
            jar.add(Cookie(self._cookie_name, staged.value, path="/"))
        else:
            jar.remove(self._cookie_name, path="/")

        for cookie in jar.delta():
            self._attach(response, cookie)

        outcome = resolve_outcome(staged.value if staged is not None else None, state)
        if outcome is not Outcome.UNTOUCHED:
            log_action("MIDDLEWARE", outcome.value.upper(), f"cookie '{self._cookie_name}' on {request.url.path}")
        return response

    def _attach(self, response: Response, cookie: Cookie) -> None:
        """
        Живую куку пишем сырым JSON. Удаление рендерит Starlette, чтобы оно было
        в ее формате (Max-Age=0 + expires).
        """
        try:
            if cookie.expired:
                response.delete_cookie(cookie.name, path=cookie.path or "/")
            else:
                response.raw_headers.append((b"set-cookie", cookie.to_header_value().encode("latin-1")))
        except HeaderConstructionError as e:
            log_error("MIDDLEWARE", f"cannot build Set-Cookie for '{cookie.name}': {e}")
            raise
        except (CookieError, UnicodeEncodeError) as e:
            log_error("MIDDLEWARE", f"cannot build Set-Cookie for '{cookie.name}': {e}")
            raise HeaderConstructionError(f"Cannot build Set-Cookie header for {cookie.name!r}: {e}") from e
