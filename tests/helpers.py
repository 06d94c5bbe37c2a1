def flash_headers(response, name: str = "_flash") -> list[str]:
    """Все Set-Cookie заголовки ответа для flash-куки."""
    return [h for h in response.headers.get_list("set-cookie") if h.startswith(f"{name}=")]


def cookie_value(header: str) -> str:
    """Значение куки из Set-Cookie как есть, ничего не раскавычиваем."""
    name_value = header.split("; ")[0]
    return name_value.partition("=")[2]


def is_deletion(header: str) -> bool:
    return "Max-Age=0" in header
