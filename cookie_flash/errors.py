from fastapi import HTTPException, status


class FlashError(Exception):
    """Базовая ошибка всех flash-компонентов."""


class DecodeError(FlashError, ValueError):
    """Значение куки - не JSON, нет ключа конверта или тип не совпал."""


class EncodeError(FlashError, TypeError):
    """Сообщение нельзя сериализовать. Это ошибка программиста, а не клиента."""


class HeaderConstructionError(FlashError, ValueError):
    """Имя или значение куки нельзя превратить в заголовок Set-Cookie."""


class MissingFlashError(HTTPException):
    """
    Хендлеру нечего отдать: куки нет или она битая.
    Для клиента оба случая выглядят одинаково - 400 Bad Request.
    """

    def __init__(self, detail: str = "Invalid/missing flash cookie"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
