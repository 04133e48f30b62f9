from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Optional, Tuple

from typing_extensions import assert_never

from ._exceptions import CacheControlError, ParseError, ValidationError
from ._models import Cachability, CacheDirectives

__all__ = (
    "parse_directive_list",
    "parse_directive_list_or_raise",
    "parse_header",
    "parse_header_or_raise",
)

logger = logging.getLogger("cache_directives.headers")

HEADER_NAME = "Cache-Control"

# Unicode White_Space, which excludes the U+001C-U+001F separators
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# delta-seconds are read into an unsigned 64-bit range
MAX_DELTA_SECONDS = 2**64 - 1

CACHABILITY_DIRECTIVES = {
    "public": Cachability.PUBLIC,
    "private": Cachability.PRIVATE,
    "no-cache": Cachability.NO_CACHE,
    "only-if-cached": Cachability.ONLY_IF_CACHED,
}

DURATION_DIRECTIVES = {
    "max-age": "max_age",
    "max-stale": "max_stale",
    "min-fresh": "min_fresh",
    # RFC 5861
    "stale-while-revalidate": "stale_while_revalidate",
    "stale-if-error": "stale_if_error",
}

# Read when well-formed, skipped otherwise without failing the list
LENIENT_DURATION_DIRECTIVES = {
    "s-maxage": "s_max_age",
}

FLAG_DIRECTIVES = {
    "must-revalidate": "must_revalidate",
    "proxy-revalidate": "proxy_revalidate",
    "immutable": "immutable",
    "no-store": "no_store",
    "no-transform": "no_transform",
}


class DirectiveKind(enum.Enum):
    CACHABILITY = "cachability"
    DURATION = "duration"
    LENIENT_DURATION = "lenient_duration"
    FLAG = "flag"
    UNKNOWN = "unknown"


def classify_directive(key: str) -> DirectiveKind:
    if key in CACHABILITY_DIRECTIVES:
        return DirectiveKind.CACHABILITY
    if key in DURATION_DIRECTIVES:
        return DirectiveKind.DURATION
    if key in LENIENT_DURATION_DIRECTIVES:
        return DirectiveKind.LENIENT_DURATION
    if key in FLAG_DIRECTIVES:
        return DirectiveKind.FLAG
    return DirectiveKind.UNKNOWN


def split_directive(token: str) -> Tuple[str, Optional[str]]:
    """
    Split a single directive into its name and optional argument.

    Only the first ``=`` separates the two, so the argument may itself
    contain ``=``. Surrounding whitespace is stripped from both parts.

    Examples:
        >>> split_directive(" max-age = 60 ")
        ('max-age', '60')
        >>> split_directive("no-store")
        ('no-store', None)
        >>> split_directive("foo=a=b")
        ('foo', 'a=b')
    """
    key, separator, value = token.partition("=")
    if not separator:
        return key.strip(WHITESPACE), None
    return key.strip(WHITESPACE), value.strip(WHITESPACE)


def parse_delta_seconds(directive: str, value: Optional[str]) -> int:
    """
    Parse the argument of a freshness directive.

    Accepts base-10 ASCII digits, optionally prefixed with ``+``, that fit
    into an unsigned 64-bit integer.
    """
    if value is None:
        raise ValidationError(f"The directive '{directive}' necessitates a value.", directive, value)

    digits = value[1:] if value.startswith("+") else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValidationError(
            f"The argument '{directive}' should be a non-negative integer, but got {value!r}.",
            directive,
            value,
        )

    seconds = int(digits)
    if seconds > MAX_DELTA_SECONDS:
        raise ValidationError(f"The argument '{directive}' is out of range: {value!r}.", directive, value)
    return seconds


def parse_directive_list_or_raise(value: str) -> CacheDirectives:
    """
    Parse the value of the Cache-Control header, i.e. everything after ``Cache-Control:``.

    Directives are applied left to right: the last cachability directive wins
    and flags stay set once seen. Unknown directives are ignored.

    Raises:
        ValidationError: A freshness directive has a missing or malformed value.
            Nothing is returned for the rest of the list in that case.

    Examples:
        >>> directives = parse_directive_list_or_raise("public, max-age=3600")
        >>> directives.cachability
        <Cachability.PUBLIC: 'public'>
        >>> directives.max_age
        3600
    """
    fields: Dict[str, Any] = {}

    for token in value.split(","):
        key, argument = split_directive(token)
        kind = classify_directive(key)

        if kind is DirectiveKind.CACHABILITY:
            fields["cachability"] = CACHABILITY_DIRECTIVES[key]
        elif kind is DirectiveKind.DURATION:
            fields[DURATION_DIRECTIVES[key]] = parse_delta_seconds(key, argument)
        elif kind is DirectiveKind.LENIENT_DURATION:
            try:
                fields[LENIENT_DURATION_DIRECTIVES[key]] = parse_delta_seconds(key, argument)
            except ValidationError as exc:
                logger.debug(f"Ignoring malformed directive: {exc}")
        elif kind is DirectiveKind.FLAG:
            fields[FLAG_DIRECTIVES[key]] = True
        elif kind is DirectiveKind.UNKNOWN:
            if key:
                logger.debug(f"Ignoring unknown directive {key!r}")
        else:
            assert_never(kind)

    return CacheDirectives(**fields)


def parse_header_or_raise(raw: str) -> CacheDirectives:
    """
    Parse a full ``Cache-Control: value`` header line.

    The header name is matched exactly, including its capitalization.

    Raises:
        ParseError: The line is not a single ``name: value`` pair, or the name
            is not ``Cache-Control``.
        ValidationError: See `parse_directive_list_or_raise`.
    """
    segments = [segment.strip(WHITESPACE) for segment in raw.split(":")]

    if len(segments) != 2:
        raise ParseError(f"The header line should contain exactly one ':', but got {raw!r}.", raw)

    name, value = segments
    if name != HEADER_NAME:
        raise ParseError(f"Expected the '{HEADER_NAME}' header, but got {name!r}.", raw)

    return parse_directive_list_or_raise(value)


def parse_directive_list(value: str) -> Optional[CacheDirectives]:
    """
    Parse a Cache-Control value, returning ``None`` if it is malformed.

    Examples:
        >>> parse_directive_list("") == CacheDirectives()
        True
        >>> parse_directive_list("max-age=abc") is None
        True
    """
    try:
        return parse_directive_list_or_raise(value)
    except CacheControlError as exc:
        logger.debug(f"Rejected Cache-Control value: {exc}")
        return None


def parse_header(raw: str) -> Optional[CacheDirectives]:
    """
    Parse a full Cache-Control header line, returning ``None`` if it is not one
    or if its value is malformed.

    Examples:
        >>> parse_header("Cache-Control: max-age=60").max_age
        60
        >>> parse_header("bar: max-age=60") is None
        True
    """
    try:
        return parse_header_or_raise(raw)
    except CacheControlError as exc:
        logger.debug(f"Rejected Cache-Control header: {exc}")
        return None
