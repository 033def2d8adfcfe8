"""Render flash messages into the markup spliced into HTML responses."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Union

from jinja2 import Environment, Template, select_autoescape

from flashembed.schemas import Message

logger = logging.getLogger(__name__)

RenderFunc = Callable[[Sequence[Message]], Union[str, bytes]]

env = Environment(autoescape=select_autoescape(default_for_string=True, default=True))

DEFAULT_TEMPLATE = env.from_string(
    """
<div class="flash-messages">
	{%- for message in messages -%}
		<div class="alert alert-{{ message.category }}">{{ message.text }}</div>
	{%- endfor -%}
</div>
"""
)


def template_renderer(template: Template) -> RenderFunc:
    """Adapt a Jinja2 template; messages are exposed as ``messages``."""

    def render(messages: Sequence[Message]) -> str:
        return template.render(messages=list(messages))

    return render


def resolve_renderer(template: Template | RenderFunc | None) -> RenderFunc:
    """Turn the middleware ``template`` argument into a render function."""
    if template is None:
        return template_renderer(DEFAULT_TEMPLATE)
    if isinstance(template, Template):
        return template_renderer(template)
    return template


def render_messages(render: RenderFunc, messages: Sequence[Message]) -> bytes:
    """Render messages, returning empty markup when rendering fails."""
    try:
        markup = render(messages)
        if isinstance(markup, str):
            return markup.encode("utf-8")
        if isinstance(markup, (bytes, bytearray)):
            return bytes(markup)
        raise TypeError(f"renderer returned {type(markup).__name__}, expected str or bytes")
    except Exception:
        # Runs mid-stream, possibly after the status line went out
        logger.exception("Cannot render %d flash message(s)", len(messages))
        return b""
