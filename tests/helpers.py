"""Shared helpers for building flash cookies and requests in tests."""

from __future__ import annotations

import base64
import json
from http.cookies import SimpleCookie

from starlette.requests import Request
from starlette.responses import Response


def encode_token(category: str, text: str) -> str:
    """Cookie value as the store writes it."""
    raw = json.dumps({"c": category, "t": text}).encode("utf-8")
    return base64.standard_b64encode(raw).decode("ascii")


def cookie_header(cookies: list[tuple[str, str]]) -> str:
    return "; ".join(f"{name}={value}" for name, value in cookies)


def make_request(cookies: list[tuple[str, str]]) -> Request:
    headers = []
    if cookies:
        headers.append((b"cookie", cookie_header(cookies).encode("latin-1")))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def set_cookies(headers: list[str]) -> dict[str, dict[str, str]]:
    """Parse Set-Cookie header values into {name: {"value": ..., attr: ...}}."""
    parsed: dict[str, dict[str, str]] = {}
    for header in headers:
        jar = SimpleCookie()
        jar.load(header)
        for name, morsel in jar.items():
            attrs = {key: str(val) for key, val in morsel.items() if val}
            attrs["value"] = morsel.value
            parsed[name] = attrs
    return parsed


def response_set_cookies(response: Response) -> dict[str, dict[str, str]]:
    headers = [
        value.decode("latin-1") for key, value in response.raw_headers if key == b"set-cookie"
    ]
    return set_cookies(headers)
