from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from cookie_flash.errors import MissingFlashError
from cookie_flash.message import FlashMessage, Message, get_message
from cookie_flash.response import FlashResponse

router = APIRouter()

DEMO_MESSAGE = "This is the message"


@router.get("/set_flash")
async def set_flash(request: Request):
    """ Кладем сообщение и уводим на страницу показа (post-redirect-get) """
    return FlashResponse.with_redirect(DEMO_MESSAGE, "/show_flash", type_=str)


@router.get("/show_flash")
async def show_flash(flash: Message[str] = Depends(FlashMessage(str))):
    """ Показываем сообщение. Без куки хендлер не вызывается - сразу 400 """
    return PlainTextResponse(flash.into_inner())


@router.get("/maybe_flash")
async def maybe_flash(request: Request):
    """ То же самое, но с запасным текстом, если сообщения нет """
    try:
        text = get_message(request, str).into_inner()
    except MissingFlashError:
        text = "No message"
    return PlainTextResponse(text)
