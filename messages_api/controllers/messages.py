"""Messages controller."""

from typing import Annotated, Any, List

from fastapi import APIRouter, Body, status

from messages_api.controllers.dependencies import MessagesServiceDep
from messages_api.views import ErrorResponse, MessageCreate, MessageRead

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post(
    "",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": MessageCreate.model_json_schema()}
            },
        }
    },
)
async def create_message(
    payload: Annotated[Any, Body()],
    service: MessagesServiceDep,
) -> MessageRead:
    message = await service.create(payload)
    return MessageRead.model_validate(message)


@router.get("", response_model=List[MessageRead])
async def list_messages(service: MessagesServiceDep) -> List[MessageRead]:
    messages = await service.find_all()
    return [MessageRead.model_validate(row) for row in messages]
