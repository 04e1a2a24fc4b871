# msgboard/routers/msg.py
import re

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from msgboard.services.message_service import message_service, resolve_client_ip

router = APIRouter(prefix="/msg", tags=["Messages"])

REQUIRED_FIELDS = ("user", "msg", "cate")
SUCCESS_TEXT = "消息发送成功！"

URLENCODED = "application/x-www-form-urlencoded"
# A "%" not followed by two hex digits, or a ";" separator.
_MALFORMED_URLENCODED = re.compile(rb"%(?![0-9A-Fa-f]{2})|;")


def _is_malformed(raw: bytes) -> bool:
    return _MALFORMED_URLENCODED.search(raw) is not None


def _form_value(form: FormData, request: Request, name: str) -> str:
    # First value wins: body fields, then query string. Uploaded files don't count.
    values = form.getlist(name) + request.query_params.getlist(name)
    values = [value for value in values if isinstance(value, str)]
    return values[0] if values else ""


async def _parse_form(request: Request) -> FormData:
    """Read the form strictly; Starlette would silently keep bad escapes."""
    if _is_malformed(request.scope.get("query_string", b"")):
        raise ValueError("malformed query string")

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == URLENCODED and _is_malformed(await request.body()):
        raise ValueError("malformed urlencoded body")

    return await request.form()


@router.post("", response_class=PlainTextResponse)
async def submit_message(request: Request):
    """Accept a form-encoded message and log it."""
    try:
        form = await _parse_form(request)
    except (ValueError, MultiPartException, StarletteHTTPException) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to parse form"
        ) from exc

    user, msg, cate = (_form_value(form, request, name) for name in REQUIRED_FIELDS)
    if not user or not msg or not cate:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields"
        )

    ip = resolve_client_ip(request.headers, request.client)
    message = message_service.build_message(user=user, msg=msg, cate=cate, ip=ip)
    message_service.record_message(message)
    return PlainTextResponse(SUCCESS_TEXT)
