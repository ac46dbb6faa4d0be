from fastapi import APIRouter, Depends, status

from autohaven.entrypoints.http.dependencies import (
    get_conversation_use_case,
    get_current_user_id,
    get_list_user_messages_use_case,
    get_mark_message_as_read_use_case,
    get_send_message_use_case,
)
from autohaven.entrypoints.http.dtos.message import MessageResponseDTO, SendMessageDTO
from autohaven.entrypoints.http.error_responses import ErrorResponse
from autohaven.entrypoints.http.mappers.message_mapper import MessageMapper
from autohaven.use_cases.get_conversation import GetConversation, GetConversationRequest
from autohaven.use_cases.list_user_messages import ListUserMessages, ListUserMessagesRequest
from autohaven.use_cases.mark_message_as_read import (
    MarkMessageAsRead,
    MarkMessageAsReadRequest,
)
from autohaven.use_cases.send_message import SendMessage

router = APIRouter(tags=["Messages"])


@router.get(
    "/messages",
    response_model=list[MessageResponseDTO],
    summary="Everything the caller sent or received",
)
def list_messages(
    user_id: int = Depends(get_current_user_id),
    use_case: ListUserMessages = Depends(get_list_user_messages_use_case),
) -> list[MessageResponseDTO]:
    result = use_case.execute(ListUserMessagesRequest(user_id=user_id))
    return MessageMapper.to_message_list_response(result.messages)


@router.get(
    "/messages/{other_user_id}/{car_id}",
    response_model=list[MessageResponseDTO],
    summary="Conversation about one listing",
    description="Messages between the caller and another user, oldest-first.",
)
def get_conversation(
    other_user_id: int,
    car_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: GetConversation = Depends(get_conversation_use_case),
) -> list[MessageResponseDTO]:
    result = use_case.execute(
        GetConversationRequest(user_id=user_id, other_user_id=other_user_id, car_id=car_id)
    )
    return MessageMapper.to_message_list_response(result.messages)


@router.post(
    "/messages",
    response_model=MessageResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message about a listing",
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        404: {"model": ErrorResponse, "description": "Car or receiver not found"},
    },
)
def send_message(
    payload: SendMessageDTO,
    user_id: int = Depends(get_current_user_id),
    use_case: SendMessage = Depends(get_send_message_use_case),
) -> MessageResponseDTO:
    result = use_case.execute(MessageMapper.to_send_request(payload, sender_id=user_id))
    return MessageMapper.to_message_response(result.message)


@router.put(
    "/messages/{message_id}/read",
    response_model=MessageResponseDTO,
    summary="Mark a received message as read",
    responses={
        403: {"model": ErrorResponse, "description": "Caller is not the receiver"},
        404: {"model": ErrorResponse, "description": "Message not found"},
    },
)
def mark_message_as_read(
    message_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: MarkMessageAsRead = Depends(get_mark_message_as_read_use_case),
) -> MessageResponseDTO:
    result = use_case.execute(MarkMessageAsReadRequest(message_id=message_id, user_id=user_id))
    return MessageMapper.to_message_response(result.message)
