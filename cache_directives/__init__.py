from cache_directives._exceptions import (
    CacheControlError as CacheControlError,
    ParseError as ParseError,
    ValidationError as ValidationError,
)
from cache_directives._headers import (
    parse_directive_list as parse_directive_list,
    parse_directive_list_or_raise as parse_directive_list_or_raise,
    parse_header as parse_header,
    parse_header_or_raise as parse_header_or_raise,
)
from cache_directives._models import Cachability as Cachability, CacheDirectives as CacheDirectives

__all__ = (
    ## Models
    "Cachability",
    "CacheDirectives",
    ## Parsing
    "parse_header",
    "parse_header_or_raise",
    "parse_directive_list",
    "parse_directive_list_or_raise",
    ## Errors
    "CacheControlError",
    "ParseError",
    "ValidationError",
)
