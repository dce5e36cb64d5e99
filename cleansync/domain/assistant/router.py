"""Chat router - rule-based assistant merged with the hosted assistant"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...auth import get_current_client
from ...database import get_db
from ...models import Client
from ...services import openai_service
from .schemas import ChatRequest, ChatResponse
from .service import AssistantService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["Assistant"])


def get_assistant_service(db: Session = Depends(get_db)) -> AssistantService:
    """Dependency injection for AssistantService"""
    return AssistantService(db)


@router.post("", response_model=ChatResponse)
async def chat(
    data: ChatRequest,
    current_client: Client = Depends(get_current_client),
    service: AssistantService = Depends(get_assistant_service),
):
    reply = service.respond(data.message, current_client)
    response = ChatResponse(**reply.model_dump())

    if openai_service.is_configured():
        try:
            hosted = await openai_service.ask_assistant(data.message, data.threadId)
        except Exception as e:
            logger.exception(f"❌ Hosted assistant failed for client {current_client.id}: {e}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

        response.message = hosted["message"]
        response.threadId = hosted["threadId"]

    return response
