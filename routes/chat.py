"""
Route handlers for chat sessions.
Thin HTTP adapter over ChatController: submit a turn, read, clear, go back.
"""
from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from config import Config
from models.api_models import ChatRequest, ConversationResponse
from services.chat_controller import get_session_registry

router = APIRouter()


def conversation_response(session_id: str, conversation) -> ConversationResponse:
    return ConversationResponse(session_id=session_id, messages=list(conversation))


@router.post("/chat", response_model=ConversationResponse)
async def chat(request: ChatRequest):
    """
    Run one chat turn and return the conversation.
    Blank text leaves the conversation unchanged.
    """
    controller = get_session_registry().get_or_create(request.session_id)
    conversation = await controller.send(request.text)
    return conversation_response(request.session_id, conversation)


@router.get("/chat/{session_id}", response_model=ConversationResponse)
async def get_conversation(session_id: str):
    """Current conversation for a session; unknown sessions read as empty."""
    controller = get_session_registry().get(session_id)
    conversation = controller.latest() if controller is not None else ()
    return conversation_response(session_id, conversation)


@router.delete("/chat/{session_id}", response_model=ConversationResponse)
async def clear_conversation(session_id: str):
    """Clear a session's conversation. Unknown sessions are left unregistered."""
    controller = get_session_registry().get(session_id)
    conversation = controller.clear() if controller is not None else ()
    return conversation_response(session_id, conversation)


@router.get("/chat/{session_id}/back")
async def go_back(session_id: str):
    """Leave the chat and redirect to the home page."""
    controller = get_session_registry().get(session_id)
    target = controller.go_back() if controller is not None else Config.HOME_URL
    return RedirectResponse(target)
