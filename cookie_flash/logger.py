import logging
import os
from typing import Optional

from cookie_flash.config import settings

logger = logging.getLogger("CookieFlash")


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> None:
    """
    Настраивает основной конфиг логов. Вызывается приложением при старте,
    а не при импорте: библиотека сама ничего не пишет в файлы.
    """
    log_dir = log_dir or settings.LOG_DIR
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        # encoding='utf-8' нужен, чтобы текст сообщений не превращался в кракозябры
        handlers.append(logging.FileHandler(os.path.join(log_dir, "flash.log"), encoding='utf-8'))

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format='%(asctime)s - [%(levelname)s] - %(message)s',
        handlers=handlers
    )


def log_action(context: str, action: str, details: str):
    """
    Логирует шаги жизненного цикла flash-куки (чтение, запись, удаление).
    Уровень DEBUG: на каждом запросе это шум.
    """
    logger.debug(f"CONTEXT: {context} | ACTION: {action} | DETAILS: {details}")


def log_error(context: str, message: str):
    """
    Отдельный метод для записи ошибок сервера: несериализуемые сообщения, битые заголовки.
    """
    logger.error(f"ERROR in {context}: {message}")


def log_warning(context: str, message: str):
    """Проблемы на стороне клиента (например, битая кука) - не ошибка сервера."""
    logger.warning(f"WARNING in {context}: {message}")
