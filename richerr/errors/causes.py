# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Low-level errors that rich errors decorate.

``Fundamental`` is a plain error built from a message, ``WithMessage``
annotates an existing exception. Both remember where they were created.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass

from richerr.config import load_config

_INTERNAL_DIR = os.path.dirname(os.path.abspath(__file__))


@dataclass(frozen=True, slots=True)
class CapturePoint:
    filename: str
    lineno: int
    function: str

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} in {self.function}"


def capture_point() -> CapturePoint | None:
    """First frame outside this package, or ``None`` when capture is off."""
    if not load_config().errors.capture_stack:
        return None

    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = os.path.abspath(frame.f_code.co_filename)
            if os.path.dirname(filename) != _INTERNAL_DIR:
                return CapturePoint(filename, frame.f_lineno, frame.f_code.co_name)
            frame = frame.f_back
        return None
    finally:
        del frame


class Fundamental(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.capture_point = capture_point()

    def __str__(self) -> str:
        return self.message


class WithMessage(Exception):
    """Annotates ``cause`` with ``message``, keeping the cause reachable."""

    def __init__(self, cause: BaseException, message: str) -> None:
        super().__init__(message)
        self.cause = cause
        self.message = message
        self.capture_point = capture_point()
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.message}: {self.cause}"

    def __reduce__(self):
        return (type(self), (self.cause, self.message), self.__dict__)


__all__ = ["CapturePoint", "Fundamental", "WithMessage", "capture_point"]
