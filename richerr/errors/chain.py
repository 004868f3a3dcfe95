# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator

from .base import RichError


def _next_cause(err: BaseException) -> BaseException | None:
    cause = getattr(err, "cause", None)
    if isinstance(cause, BaseException):
        return cause
    return err.__cause__


def iter_causes(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` followed by each cause down to the root."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _next_cause(current)


def root_cause(err: BaseException | None) -> BaseException | None:
    """Innermost error of a wrap chain, returned unchanged."""
    root = None
    for root in iter_causes(err):
        pass
    return root


def format_chain(err: BaseException | None) -> str:
    lines: list[str] = []
    for link in iter_causes(err):
        name = type(link).__name__
        if isinstance(link, RichError):
            lines.append(f"{name} [{int(link.code)} {link.label()}]")
        else:
            lines.append(f"{name}: {getattr(link, 'message', link)}")

        point = getattr(link, "capture_point", None)
        if point is not None:
            lines.append(f"    at {point}")
    return "\n".join(lines)


__all__ = ["format_chain", "iter_causes", "root_cause"]
