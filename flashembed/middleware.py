"""Application middlewares (flash message embedding)."""

from __future__ import annotations

from fastapi import FastAPI
from jinja2 import Template
from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.types import Message as ASGIMessage

from flashembed.config import get_settings
from flashembed.rendering import RenderFunc, render_messages, resolve_renderer
from flashembed.schemas import Message
from flashembed.sniff import detect_content_type, is_html
from flashembed.store import pop_all


class FlashMessagesMiddleware:
    """
    Embed pending flash messages into HTML responses.

    If the body contains a ``<flashmessages>`` tag, that tag is replaced with
    the rendered messages (or removed when there are none). Otherwise the
    messages are inserted before ``</body>``.

    Each body message is scanned on its own, so tags must not be split across
    ``http.response.body`` messages. Non-HTML responses are passed through
    untouched and their messages stay available for a later page.
    """

    def __init__(self, app: ASGIApp, template: Template | RenderFunc | None = None) -> None:
        self.app = app
        self.render = resolve_renderer(template)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        embedder = FlashEmbedder(self.render, Request(scope), send)
        await self.app(scope, receive, embedder.send)
        await embedder.flush_start()


class FlashEmbedder:
    """Per-response rewrite state wrapped around the downstream ``send``."""

    def __init__(self, render: RenderFunc, request: Request, send: Send) -> None:
        settings = get_settings()
        self.render = render
        self.request = request
        self.downstream = send
        self.placement_tag = settings.placement_tag.encode("utf-8")
        self.fallback_tag = settings.fallback_tag.encode("utf-8")
        self.start_message: ASGIMessage | None = None
        self.embed: bool | None = None
        self.messages: list[Message] = []

    async def send(self, message: ASGIMessage) -> None:
        if message["type"] == "http.response.start":
            # Held back until the first body chunk decides on the headers
            self.start_message = message
            return

        if message["type"] != "http.response.body":
            await self.flush_start()
            await self.downstream(message)
            return

        body = message.get("body", b"")
        if self.embed is None:
            self.classify(body)
            await self.flush_start()

        if self.embed:
            message = {**message, "body": self.rewrite(body)}
        await self.downstream(message)

    async def flush_start(self) -> None:
        if self.start_message is not None:
            message, self.start_message = self.start_message, None
            await self.downstream(message)

    def classify(self, body: bytes) -> None:
        """Decide once whether this response is HTML, popping messages if so."""
        if self.start_message is None:
            self.embed = False
            return

        self.start_message.setdefault("headers", [])
        headers = MutableHeaders(scope=self.start_message)
        content_type = headers.get("content-type") or detect_content_type(body)
        self.embed = is_html(content_type)
        if not self.embed:
            return

        carrier = Response()
        self.messages = pop_all(carrier, self.request)
        for key, value in carrier.raw_headers:
            if key == b"set-cookie":
                headers.append("set-cookie", value.decode("latin-1"))
        # Body length changes once markup is spliced in or the tag removed
        del headers["content-length"]

    def rewrite(self, data: bytes) -> bytes:
        start = data.find(self.placement_tag)
        end = start + len(self.placement_tag)
        if start < 0 and self.messages:
            start = data.find(self.fallback_tag)
            end = start

        if start < 0:
            return data

        markup = b""
        if self.messages:
            markup = render_messages(self.render, self.messages)
            self.messages = []
        return data[:start] + markup + data[end:]


def install_middlewares(app: FastAPI, template: Template | RenderFunc | None = None) -> None:
    """Install required middlewares."""
    app.add_middleware(FlashMessagesMiddleware, template=template)
