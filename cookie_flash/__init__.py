from cookie_flash.codec import decode, encode
from cookie_flash.config import DEFAULT_COOKIE_NAME
from cookie_flash.errors import (
    DecodeError,
    EncodeError,
    FlashError,
    HeaderConstructionError,
    MissingFlashError,
)
from cookie_flash.message import FlashMessage, Message, get_message
from cookie_flash.middleware import CookieState, FlashMiddleware, Outcome, resolve_outcome
from cookie_flash.response import FlashResponse

__all__ = [
    "DEFAULT_COOKIE_NAME",
    "CookieState",
    "DecodeError",
    "EncodeError",
    "FlashError",
    "FlashMessage",
    "FlashMiddleware",
    "FlashResponse",
    "HeaderConstructionError",
    "Message",
    "MissingFlashError",
    "Outcome",
    "decode",
    "encode",
    "get_message",
    "resolve_outcome",
]
