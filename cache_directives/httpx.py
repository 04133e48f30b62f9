from __future__ import annotations

import logging
from typing import Optional

try:
    import httpx
except ImportError as e:
    raise ImportError(
        "httpx is required to use cache_directives.httpx module. "
        "Please install cache-directives with the 'httpx' extra, "
        "e.g., 'pip install cache-directives[httpx]'."
    ) from e

from httpx._types import HeaderTypes

from ._headers import HEADER_NAME, parse_directive_list
from ._models import CacheDirectives

__all__ = ("parse_headers", "parse_request", "parse_response")

logger = logging.getLogger("cache_directives.httpx")


def parse_headers(headers: HeaderTypes) -> Optional[CacheDirectives]:
    """
    Parse every Cache-Control field found in ``headers``.

    Repeated fields are combined into one comma-separated list in the order
    they appear. Missing fields give the default directives.
    """
    values = httpx.Headers(headers).get_list(HEADER_NAME)

    if not values:
        return CacheDirectives()

    if len(values) > 1:
        logger.debug(f"Combining {len(values)} Cache-Control fields")

    return parse_directive_list(", ".join(values))


def parse_request(request: httpx.Request) -> Optional[CacheDirectives]:
    return parse_headers(request.headers)


def parse_response(response: httpx.Response) -> Optional[CacheDirectives]:
    return parse_headers(response.headers)
