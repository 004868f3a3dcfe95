from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

from richerr.config import load_config
from richerr.errors import codes


@pytest.fixture(autouse=True)
def _fresh_config() -> Iterator[None]:
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture(autouse=True)
def _isolated_default_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(codes, "default_registry", codes.CodeRegistry.with_builtins())


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    logger.enable("richerr")
    handler_id = logger.add(
        lambda msg: messages.append(msg.record["message"]),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    logger.remove(handler_id)
    logger.disable("richerr")
