from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fastapi import Request

from cookie_flash.codec import decode
from cookie_flash.errors import DecodeError, MissingFlashError
from cookie_flash.extensions import request_extensions
from cookie_flash.jar import FlashCookie
from cookie_flash.logger import log_action, log_warning

T = TypeVar("T")


@dataclass(frozen=True)
class Message(Generic[T]):
    """Прочитанное flash-сообщение. Принадлежит одному вызову хендлера."""

    value: T

    def into_inner(self) -> T:
        return self.value


def get_message(request: Request, type_: Any = Any) -> Message:
    """
    Достает сообщение, которое middleware положила в мешок запроса.

    Нет куки и битая кука для хендлера одно и то же (MissingFlashError, 400),
    но в логах их видно по-разному.
    """
    cookie = request_extensions(request.scope).get(FlashCookie)
    if cookie is None:
        log_action("EXTRACTOR", "MISSING", "no flash cookie present")
        raise MissingFlashError()

    try:
        value = decode(cookie.value, type_)
    except DecodeError as e:
        log_warning("EXTRACTOR", f"flash cookie '{cookie.name}' ignored: {e}")
        raise MissingFlashError() from e

    return Message(value)


class FlashMessage:
    """
    Зависимость FastAPI:

        async def show(flash: Message[str] = Depends(FlashMessage(str))): ...
    """

    def __init__(self, type_: Any = Any):
        self.type_ = type_

    def __call__(self, request: Request) -> Message:
        return get_message(request, self.type_)
