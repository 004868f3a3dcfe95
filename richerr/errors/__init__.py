# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    CodeAlreadyRegisteredError,
    RichError,
    SupportsStr,
    new,
    new_friendly,
    new_friendly_fix,
    wrap,
    wrap_friendly,
    wrap_friendly_fix,
)
from .causes import CapturePoint, Fundamental, WithMessage
from .chain import format_chain, iter_causes, root_cause
from .codes import (
    FORBIDDEN,
    GENERIC,
    INVALID_ARGS,
    INVALID_SYNTAX,
    NOT_FOUND,
    UNAUTHORIZED,
    UNAVAILABLE,
    UNKNOWN,
    Code,
    CodeDetails,
    CodeRegistry,
    code_http_status,
    code_label,
    default_registry,
    register_code,
)

__all__ = [
    "FORBIDDEN",
    "GENERIC",
    "INVALID_ARGS",
    "INVALID_SYNTAX",
    "NOT_FOUND",
    "UNAUTHORIZED",
    "UNAVAILABLE",
    "UNKNOWN",
    "CapturePoint",
    "Code",
    "CodeAlreadyRegisteredError",
    "CodeDetails",
    "CodeRegistry",
    "Fundamental",
    "RichError",
    "SupportsStr",
    "WithMessage",
    "code_http_status",
    "code_label",
    "default_registry",
    "format_chain",
    "iter_causes",
    "new",
    "new_friendly",
    "new_friendly_fix",
    "register_code",
    "root_cause",
    "wrap",
    "wrap_friendly",
    "wrap_friendly_fix",
]
