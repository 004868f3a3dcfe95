# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Rich error type with classification codes and friendly messages.

Use it sparingly, at the points of an application that know enough to
classify a failure and explain it to an end user. Lower layers are better
served by plain exceptions, which these errors wrap as their cause.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from . import codes
from .causes import Fundamental, WithMessage
from .codes import INVALID_ARGS, Code, CodeRegistry


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


def _resolve(registry: CodeRegistry | None) -> CodeRegistry:
    return codes.default_registry if registry is None else registry


@dataclass(slots=True, eq=False)
class RichError(Exception):
    """Decorates a developer-facing cause for user feedback.

    Couples the cause with a code classifying the error and an optional
    friendly message and fix. Values that caused the error go in ``data``
    and are listed after the friendly message.

    Build instances with ``new``, ``wrap`` or one of their variants and
    treat them as immutable.
    """

    code: Code
    cause: BaseException
    friendly_template: str = ""
    fix: str = ""
    data: tuple[SupportsStr, ...] = ()

    def __post_init__(self) -> None:
        if self.cause is None:
            raise ValueError("a rich error needs a cause")
        self.code = Code(self.code)
        self.data = tuple(self.data)
        Exception.__init__(self, self.code)
        self.__cause__ = self.cause

    def label(self, registry: CodeRegistry | None = None) -> str:
        return _resolve(registry).label(self.code)

    def http_status(self, registry: CodeRegistry | None = None) -> int:
        return _resolve(registry).http_status(self.code)

    def error(self, registry: CodeRegistry | None = None) -> str:
        """Developer-facing text: ``"<label>: <cause>"``."""
        return f"{self.label(registry)}: {self.cause}"

    def __str__(self) -> str:
        return self.error()

    def __reduce__(self):
        return (
            _restore,
            (type(self), self.code, self.cause, self.friendly_template, self.fix, self.data),
        )

    def friendly(self, registry: CodeRegistry | None = None) -> str:
        """User-facing text, or ``""`` when neither message nor fix is set."""
        if not self.friendly_template and not self.fix:
            return ""

        text = f"{self.label(registry)}: {self.friendly_template}"
        last = len(self.data) - 1
        for i, value in enumerate(self.data):
            text += f" {value}"
            text += "." if i == last else ","
        if self.fix:
            text += f" {self.fix}"
        return text


def _restore(
    cls: type[RichError],
    code: Code,
    cause: BaseException,
    friendly_template: str,
    fix: str,
    data: tuple[SupportsStr, ...],
) -> RichError:
    # bypasses subclass __init__ so presets like CodeAlreadyRegisteredError keep their cause
    err = cls.__new__(cls)
    RichError.__init__(err, code, cause, friendly_template, fix, data)
    return err


class CodeAlreadyRegisteredError(RichError):
    def __init__(self, code: int) -> None:
        super().__init__(
            code=INVALID_ARGS,
            cause=Fundamental("already registered"),
            data=(Code(code),),
        )


def new(code: int, message: str, *data: SupportsStr) -> RichError:
    """Create an error whose cause is a plain error built from ``message``."""
    return RichError(code=Code(code), cause=Fundamental(message), data=data)


def new_friendly(code: int, message: str, friendly: str, *data: SupportsStr) -> RichError:
    return RichError(
        code=Code(code),
        cause=Fundamental(message),
        friendly_template=friendly,
        data=data,
    )


def new_friendly_fix(
    code: int, message: str, friendly: str, fix: str, *data: SupportsStr
) -> RichError:
    return RichError(
        code=Code(code),
        cause=Fundamental(message),
        friendly_template=friendly,
        fix=fix,
        data=data,
    )


def _annotate(err: BaseException | None, message: str) -> WithMessage:
    if err is None:
        raise ValueError("cannot wrap None")
    return WithMessage(err, message)


def wrap(code: int, err: BaseException, message: str, *data: SupportsStr) -> RichError:
    """Annotate ``err`` with ``message`` and the call site.

    ``err`` stays reachable through ``root_cause``. Wrapping ``None``
    raises ``ValueError``.
    """
    return RichError(code=Code(code), cause=_annotate(err, message), data=data)


def wrap_friendly(
    code: int, err: BaseException, message: str, friendly: str, *data: SupportsStr
) -> RichError:
    return RichError(
        code=Code(code),
        cause=_annotate(err, message),
        friendly_template=friendly,
        data=data,
    )


def wrap_friendly_fix(
    code: int,
    err: BaseException,
    message: str,
    friendly: str,
    fix: str,
    *data: SupportsStr,
) -> RichError:
    return RichError(
        code=Code(code),
        cause=_annotate(err, message),
        friendly_template=friendly,
        fix=fix,
        data=data,
    )


__all__ = [
    "CodeAlreadyRegisteredError",
    "RichError",
    "SupportsStr",
    "new",
    "new_friendly",
    "new_friendly_fix",
    "wrap",
    "wrap_friendly",
    "wrap_friendly_fix",
]
