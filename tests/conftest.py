"""Shared fixtures for the messages API test suite."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List
from uuid import uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from messages_api.application.interfaces import MessageRepositoryInterface  # noqa: E402
from messages_api.models.message import Message  # noqa: E402

_DB_ENV_VARS = (
    "DATABASE_URL",
    "DATABASE_HOST",
    "DATABASE_PORT",
    "DATABASE_USER",
    "DATABASE_PASSWORD",
    "DATABASE_DB_NAME",
    "ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run every test without inherited database variables or a stray .env."""

    for name in _DB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class InMemoryMessageRepository(MessageRepositoryInterface):
    """Repository double that keeps rows in a list."""

    def __init__(self) -> None:
        self.rows: List[Message] = []
        self.error: Exception | None = None

    def create(self, text: str) -> Message:
        return Message(text=text)

    async def save(self, message: Message) -> Message:
        if self.error is not None:
            raise self.error
        if message.id is None:
            message.id = uuid4()
        if message.created_at is None:
            message.created_at = datetime.now(timezone.utc)
        self.rows.append(message)
        return message

    async def find(self) -> List[Message]:
        if self.error is not None:
            raise self.error
        return list(self.rows)


@pytest.fixture
def repository() -> InMemoryMessageRepository:
    return InMemoryMessageRepository()
