"""Cookie-backed one-time flash messages."""

from __future__ import annotations

import base64
import logging
import threading
import time
from datetime import datetime, timezone

from starlette.requests import Request
from starlette.responses import Response

from flashembed.config import get_settings
from flashembed.schemas import Message

logger = logging.getLogger(__name__)

_CONSUMED_STATE = "flash_consumed"
_EXPIRED = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)

_sequence_lock = threading.Lock()
_last_sequence = 0


def _next_sequence_key() -> int:
    """Nanosecond timestamp, strictly increasing within the process."""
    global _last_sequence
    with _sequence_lock:
        _last_sequence = max(time.time_ns(), _last_sequence + 1)
        return _last_sequence


def _order_key(name: str, namespace: str) -> tuple[int, int, str]:
    # Numeric keys compare as numbers so keys of different width keep push order.
    suffix = name[len(namespace) :]
    if suffix.isascii() and suffix.isdigit():
        return (0, int(suffix), name)
    return (1, 0, name)


def _consumed(request: Request) -> set[str]:
    consumed = getattr(request.state, _CONSUMED_STATE, None)
    if consumed is None:
        consumed = set()
        setattr(request.state, _CONSUMED_STATE, consumed)
    return consumed


def push(response: Response, category: str, text: str) -> None:
    """
    Attach a flash message cookie to the response.

    Must be called before the response is sent. Messages that cannot be
    serialised are dropped with a warning.
    """
    settings = get_settings()
    try:
        raw = Message(category=category, text=text).to_payload()
    except ValueError as exc:
        # ValidationError and PydanticSerializationError both derive from ValueError
        logger.warning("Skipping flash message that cannot be serialised: %s", exc)
        return

    response.set_cookie(
        key=f"{settings.cookie_namespace}{_next_sequence_key()}",
        value=base64.standard_b64encode(raw).decode("ascii"),
        max_age=settings.cookie_max_age,
        expires=settings.cookie_max_age,
        path=settings.cookie_path,
        httponly=True,
    )


def pop_all(response: Response, request: Request) -> list[Message]:
    """
    Return the request's flash messages in push order and expire their cookies.

    Every cookie carrying the flash prefix is expired on the response, including
    the ones that fail to decode. Cookies already popped for this request are
    ignored, so a second call returns an empty list.
    """
    settings = get_settings()
    namespace = settings.cookie_namespace
    consumed = _consumed(request)

    names = [
        name
        for name in request.cookies
        if name.startswith(namespace) and name not in consumed
    ]
    names.sort(key=lambda name: _order_key(name, namespace))

    messages: list[Message] = []
    for name in names:
        consumed.add(name)
        response.set_cookie(
            key=name,
            value="",
            max_age=0,
            expires=_EXPIRED,
            path=settings.cookie_path,
            httponly=True,
        )
        try:
            raw = base64.b64decode(request.cookies[name], validate=True)
            messages.append(Message.from_payload(raw))
        except ValueError:
            # binascii.Error and ValidationError both derive from ValueError
            logger.debug("Dropping undecodable flash cookie %s", name)
    return messages
