"""
Куки и "дельта банки" (cookie jar delta).

Банка помнит, какие куки уже есть у клиента (original), и какие изменения мы
хотим (delta). Наружу уходит только delta - ровно те Set-Cookie, которые нужны.
"""
import re
from dataclasses import dataclass
from typing import Optional

from cookie_flash.errors import HeaderConstructionError

# token из RFC 7230: допустимые символы имени куки
_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# Печатный ASCII без ";" - значение пишем как есть, без кавычек
_VALUE_RE = re.compile(r"[\x20-\x3a\x3c-\x7e]*")


@dataclass(frozen=True)
class Cookie:
    name: str
    value: str = ""
    path: Optional[str] = None
    expired: bool = False

    def to_header_value(self) -> str:
        """Set-Cookie для живой куки: значение уходит сырым JSON, без кавычек SimpleCookie."""
        if not _NAME_RE.fullmatch(self.name):
            raise HeaderConstructionError(f"Illegal cookie name {self.name!r}")
        if not _VALUE_RE.fullmatch(self.value):
            raise HeaderConstructionError(f"Illegal characters in value of cookie {self.name!r}")
        parts = [f"{self.name}={self.value}"]
        if self.path:
            parts.append(f"Path={self.path}")
        return "; ".join(parts)


@dataclass(frozen=True)
class FlashCookie(Cookie):
    """Сырая flash-кука из входящего запроса. Живет в мешке запроса один цикл."""


class CookieJar:
    def __init__(self):
        self._original: dict[str, Cookie] = {}
        self._delta: dict[str, Cookie] = {}

    def add_original(self, cookie: Cookie) -> None:
        """Кука, которая у клиента уже есть. Сама по себе заголовков не дает."""
        self._original[cookie.name] = cookie

    def add(self, cookie: Cookie) -> None:
        self._delta[cookie.name] = cookie

    def remove(self, name: str, path: Optional[str] = "/") -> None:
        # Удалять у клиента нужно только то, что у него было
        if name in self._original:
            self._delta[name] = Cookie(name, "", path, expired=True)
        else:
            self._delta.pop(name, None)

    def get(self, name: str) -> Optional[Cookie]:
        if name in self._delta:
            cookie = self._delta[name]
            return None if cookie.expired else cookie
        return self._original.get(name)

    def delta(self) -> list[Cookie]:
        return list(self._delta.values())
