"""
Хранилища одного цикла запрос/ответ.

Оба мешка лежат в ASGI scope под приватными ключами-объектами: с ними не совпадет
ни один строковый ключ, а прочитать их можно только через функции этого модуля.
Сам мешок - изменяемый объект, поэтому поверхностная копия scope видит те же данные.
"""
from typing import Any, MutableMapping, Optional, Type, TypeVar

T = TypeVar("T")


class _Token:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"<cookie_flash {self.name} extensions>"


_REQUEST_KEY = _Token("request")
_RESPONSE_KEY = _Token("response")


class Extensions:
    """Типизированный мешок: не больше одного значения на тип."""

    def __init__(self):
        self._map: dict[type, Any] = {}

    def insert(self, value: Any) -> None:
        self._map[type(value)] = value

    def get(self, type_: Type[T]) -> Optional[T]:
        return self._map.get(type_)

    def remove(self, type_: Type[T]) -> Optional[T]:
        return self._map.pop(type_, None)

    def __contains__(self, type_: type) -> bool:
        return type_ in self._map

    def __len__(self) -> int:
        return len(self._map)


def begin_cycle(scope: MutableMapping[str, Any]) -> tuple[Extensions, Extensions]:
    """Кладет в scope свежие мешки запроса и ответа. Вызывается middleware на входе."""
    request_bag, response_bag = Extensions(), Extensions()
    scope[_REQUEST_KEY] = request_bag  # type: ignore[index]
    scope[_RESPONSE_KEY] = response_bag  # type: ignore[index]
    return request_bag, response_bag


def request_extensions(scope: MutableMapping[str, Any]) -> Extensions:
    return scope.setdefault(_REQUEST_KEY, Extensions())  # type: ignore[call-overload]


def response_extensions(scope: MutableMapping[str, Any]) -> Extensions:
    return scope.setdefault(_RESPONSE_KEY, Extensions())  # type: ignore[call-overload]
