"""Errors decorated with a classification code, a friendly message and a fix.

This package works best when used sparingly at the critical points of an
application, where handling code knows enough to explain the failure to an
end user. Lower layers should keep raising ordinary exceptions; ``wrap``
turns them into rich errors without losing the original cause.
"""

from richerr.errors import (
    FORBIDDEN,
    GENERIC,
    INVALID_ARGS,
    INVALID_SYNTAX,
    NOT_FOUND,
    UNAUTHORIZED,
    UNAVAILABLE,
    UNKNOWN,
    Code,
    CodeAlreadyRegisteredError,
    CodeDetails,
    CodeRegistry,
    RichError,
    code_http_status,
    code_label,
    default_registry,
    format_chain,
    iter_causes,
    new,
    new_friendly,
    new_friendly_fix,
    register_code,
    root_cause,
    wrap,
    wrap_friendly,
    wrap_friendly_fix,
)
from richerr.logging import log_error, setup_logging

__all__ = [
    "FORBIDDEN",
    "GENERIC",
    "INVALID_ARGS",
    "INVALID_SYNTAX",
    "NOT_FOUND",
    "UNAUTHORIZED",
    "UNAVAILABLE",
    "UNKNOWN",
    "Code",
    "CodeAlreadyRegisteredError",
    "CodeDetails",
    "CodeRegistry",
    "RichError",
    "code_http_status",
    "code_label",
    "default_registry",
    "format_chain",
    "iter_causes",
    "log_error",
    "new",
    "new_friendly",
    "new_friendly_fix",
    "register_code",
    "root_cause",
    "setup_logging",
    "wrap",
    "wrap_friendly",
    "wrap_friendly_fix",
]
