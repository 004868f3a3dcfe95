# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error classification codes and the registry of their presentation details."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from threading import Lock

from richerr.logging.logger import logger


class Code(int):
    """Category of an error.

    The set is open: applications define their own codes by calling
    ``Code(n)`` and registering presentation details for them.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Code({int(self)})"


# should never be used, marks an unspecified default
UNKNOWN = Code(0)
# nonspecific error, use when unsure which code applies
GENERIC = Code(1)
# provided values cannot be deserialized
INVALID_SYNTAX = Code(2)
# provided arguments are invalid
INVALID_ARGS = Code(3)
# problem with the client's credentials
UNAUTHORIZED = Code(4)
# access isn't permitted, regardless of authorization state
FORBIDDEN = Code(5)
# a provided value couldn't be retrieved
NOT_FOUND = Code(6)
# something that needs to be available cannot be reached
UNAVAILABLE = Code(7)

DEFAULT_HTTP_STATUS = int(HTTPStatus.INTERNAL_SERVER_ERROR)
DEFAULT_LABEL = "error"


@dataclass(frozen=True, slots=True)
class CodeDetails:
    http_status: int
    label: str


DEFAULT_DETAILS = CodeDetails(DEFAULT_HTTP_STATUS, DEFAULT_LABEL)

BUILTIN_DETAILS: Mapping[Code, CodeDetails] = {
    UNKNOWN: CodeDetails(HTTPStatus.INTERNAL_SERVER_ERROR, "error"),
    GENERIC: CodeDetails(HTTPStatus.INTERNAL_SERVER_ERROR, "error"),
    INVALID_SYNTAX: CodeDetails(HTTPStatus.BAD_REQUEST, "syntax"),
    INVALID_ARGS: CodeDetails(HTTPStatus.BAD_REQUEST, "arguments"),
    UNAUTHORIZED: CodeDetails(HTTPStatus.UNAUTHORIZED, "auth"),
    FORBIDDEN: CodeDetails(HTTPStatus.FORBIDDEN, "auth"),
    NOT_FOUND: CodeDetails(HTTPStatus.NOT_FOUND, "missing"),
    UNAVAILABLE: CodeDetails(HTTPStatus.SERVICE_UNAVAILABLE, "unavailable"),
}


class CodeRegistry:
    """Thread-safe mapping from codes to their HTTP status and label.

    Lookups never fail: unregistered codes resolve to ``DEFAULT_DETAILS``.
    Registration refuses to overwrite an existing entry.
    """

    def __init__(self, seed: Mapping[int, CodeDetails] | None = None) -> None:
        self._lock = Lock()
        self._details: dict[Code, CodeDetails] = {}
        for code, details in (seed or {}).items():
            self._details[Code(code)] = details

    @classmethod
    def with_builtins(cls) -> CodeRegistry:
        return cls(BUILTIN_DETAILS)

    def register(self, code: int, http_status: int, label: str) -> None:
        key = Code(code)
        with self._lock:
            if key in self._details:
                existing = self._details[key]
            else:
                existing = None
                self._details[key] = CodeDetails(int(http_status), label)

        if existing is not None:
            logger.warning(
                f"code {int(key)} already registered as {existing.label!r} ({existing.http_status})"
            )
            from .base import CodeAlreadyRegisteredError

            raise CodeAlreadyRegisteredError(key)
        logger.debug(f"registered code {int(key)} as {label!r} ({int(http_status)})")

    def details(self, code: int) -> CodeDetails:
        with self._lock:
            return self._details.get(Code(code), DEFAULT_DETAILS)

    def label(self, code: int) -> str:
        return self.details(code).label

    def http_status(self, code: int) -> int:
        return int(self.details(code).http_status)

    def codes(self) -> list[Code]:
        with self._lock:
            return sorted(self._details)

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, int):
            return False
        with self._lock:
            return Code(code) in self._details

    def __len__(self) -> int:
        with self._lock:
            return len(self._details)


default_registry = CodeRegistry.with_builtins()


def register_code(code: int, http_status: int, label: str) -> None:
    """Add ``code`` to the default registry. Raises on duplicates."""
    default_registry.register(code, http_status, label)


def code_label(code: int) -> str:
    """Label for ``code``, defaulting to ``"error"``."""
    return default_registry.label(code)


def code_http_status(code: int) -> int:
    """HTTP status for ``code``, defaulting to 500."""
    return default_registry.http_status(code)
