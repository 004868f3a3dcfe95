# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from richerr.config import load_config

from .logger import logger


def log_error(err: BaseException, level: str = "ERROR") -> None:
    """Write the developer-facing text of ``err`` to the log.

    Rich errors are bound with their code and HTTP status. With
    ``RICHERR_DEBUG_LOGGING`` enabled the full cause chain is appended.
    """
    from richerr.errors.base import RichError
    from richerr.errors.chain import format_chain

    if isinstance(err, RichError):
        bound = logger.bind(code=int(err.code), http_status=err.http_status())
        text = err.error()
    else:
        bound = logger.bind(code=None, http_status=None)
        text = str(err)

    if load_config().debug_logging:
        text = f"{text}\n{format_chain(err)}"
    # attributed to the caller, so a disabled "richerr" namespace does not swallow it
    bound.opt(depth=1).log(level.upper(), text)


__all__ = ["log_error"]
