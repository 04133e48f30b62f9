from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

__all__ = ("Cachability", "CacheDirectives")


class Cachability(enum.Enum):
    """How the data may be cached."""

    PUBLIC = "public"
    """Any cache can cache this data."""

    PRIVATE = "private"
    """Data cannot be cached in shared caches."""

    NO_CACHE = "no-cache"
    """No one can cache this data."""

    ONLY_IF_CACHED = "only-if-cached"
    """Cache the data the first time, and use the cache from then on."""


@dataclass(frozen=True)
class CacheDirectives:
    """
    Directives understood from a single Cache-Control header.

    Durations are delta-seconds as non-negative integers and stay ``None``
    when the directive was not present. Flags default to ``False``.

    Supported Directives:
    - public, private, no-cache, only-if-cached [RFC7234, Section 5.2]
    - max-age [RFC7234, Section 5.2.1.1, 5.2.2.8]
    - s-maxage [RFC7234, Section 5.2.2.9]
    - max-stale [RFC7234, Section 5.2.1.2]
    - min-fresh [RFC7234, Section 5.2.1.3]
    - must-revalidate [RFC7234, Section 5.2.2.1]
    - proxy-revalidate [RFC7234, Section 5.2.2.7]
    - no-store [RFC7234, Section 5.2.1.5, 5.2.2.3]
    - no-transform [RFC7234, Section 5.2.1.6, 5.2.2.4]
    - immutable [RFC8246]
    - stale-while-revalidate [RFC5861, Section 3]
    - stale-if-error [RFC5861, Section 4]
    """

    cachability: Optional[Cachability] = None

    max_age: Optional[int] = None
    s_max_age: Optional[int] = None
    max_stale: Optional[int] = None
    min_fresh: Optional[int] = None

    must_revalidate: bool = False
    proxy_revalidate: bool = False
    immutable: bool = False
    no_store: bool = False
    no_transform: bool = False

    # RFC 5861
    stale_while_revalidate: Optional[int] = None
    stale_if_error: Optional[int] = None
