# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from .logger import logger, setup_logging
from .reporting import log_error

__all__ = [
    "log_error",
    "logger",
    "setup_logging",
]
