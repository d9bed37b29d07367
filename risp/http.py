"""The httpget primitive.

(httpget url) issues a blocking GET and returns a three element list:
status code, a list of (name value) header pairs in response order, and a
Structured value holding the decoded body. JSON bodies are decoded into
Python data; anything else is kept as text.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger

from risp import LispValue, config
from risp.errors import RispHttpError, RispTypeError
from risp.types.environment import Environment
from risp.types.primitive import Primitive
from risp.types.structured import Structured


def _decode_body(response: httpx.Response) -> Any:
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("httpget {}: body declared JSON but did not decode: {}", response.url, exc)
    return response.text


def make_httpget(transport: Optional[httpx.BaseTransport] = None) -> Primitive:
    """Build the httpget primitive.

    Timeout and redirect policy are read from the environment once, here.
    `transport` lets a host (or a test) substitute httpx's network layer.
    """
    timeout = config.get_http_timeout()
    follow_redirects = config.get_follow_redirects()

    def httpget(env: Environment, args: list[LispValue]) -> LispValue:
        url = args[0]
        if not isinstance(url, str):
            raise RispTypeError("httpget", "a URL string", url)

        logger.debug("httpget GET {}", url)
        try:
            with httpx.Client(
                transport=transport, timeout=timeout, follow_redirects=follow_redirects
            ) as client:
                response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RispHttpError(url, str(exc) or type(exc).__name__) from exc

        status = response.status_code
        headers = [[name, value] for name, value in response.headers.multi_items()]
        body = Structured(_decode_body(response))
        logger.debug("httpget {} -> {} ({} headers)", url, status, len(headers))
        return [status, headers, body]

    return Primitive("httpget", httpget, 1, 1)
