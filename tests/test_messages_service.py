"""Service-level tests for creating and listing messages."""

from __future__ import annotations

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from messages_api.services import MessagesService, validate_create_message
from messages_api.utils import MessageValidationError
from messages_api.views import MessageCreate


def test_create_returns_persisted_record(repository):
    service = MessagesService(repository)

    message = asyncio.run(service.create({"text": "Merhaba"}))

    assert message.text == "Merhaba"
    assert message.id is not None
    assert message.created_at is not None
    assert repository.rows == [message]


def test_create_assigns_unique_ids_and_ordered_timestamps(repository):
    service = MessagesService(repository)

    async def create_many():
        return [await service.create({"text": f"message {i}"}) for i in range(20)]

    created = asyncio.run(create_many())

    assert len({m.id for m in created}) == len(created)
    timestamps = [m.created_at for m in created]
    assert timestamps == sorted(timestamps)


def test_create_accepts_validated_schema(repository):
    service = MessagesService(repository)

    message = asyncio.run(service.create(MessageCreate(text="x")))

    assert message.text == "x"


@pytest.mark.parametrize(
    ("payload", "constraint"),
    [
        ({"text": ""}, "minLength"),
        ({"text": None}, "isString"),
        ({"text": 42}, "isString"),
        ({}, "isDefined"),
        (None, "isObject"),
        (["text"], "isObject"),
        ({"text": "ok", "author": "me"}, "whitelist"),
    ],
)
def test_invalid_payloads_are_rejected_and_not_persisted(repository, payload, constraint):
    service = MessagesService(repository)

    with pytest.raises(MessageValidationError) as exc_info:
        asyncio.run(service.create(payload))

    assert constraint in {v.constraint for v in exc_info.value.violations}
    assert repository.rows == []


def test_validation_reports_field_names():
    result = validate_create_message({"text": "", "extra": True})

    assert not result.ok
    assert result.value is None
    fields = {(v.field, v.constraint) for v in result.violations}
    assert ("text", "minLength") in fields
    assert ("extra", "whitelist") in fields


def test_validation_success_returns_typed_value():
    result = validate_create_message({"text": "hello"})

    assert result.ok
    assert isinstance(result.value, MessageCreate)
    assert result.value.text == "hello"


def test_find_all_returns_every_created_message(repository):
    service = MessagesService(repository)

    async def scenario():
        for text in ("a", "b", "c"):
            await service.create({"text": text})
        return await service.find_all()

    messages = asyncio.run(scenario())

    assert sorted(m.text for m in messages) == ["a", "b", "c"]


def test_store_errors_propagate_unchanged(repository):
    error = OperationalError("INSERT", {}, Exception("connection refused"))
    repository.error = error
    service = MessagesService(repository)

    with pytest.raises(OperationalError) as exc_info:
        asyncio.run(service.create({"text": "lost"}))
    assert exc_info.value is error

    with pytest.raises(OperationalError):
        asyncio.run(service.find_all())
