"""
Hosted assistant (OpenAI Responses API).

A conversation "thread" is the id of the previous response: passing it back
as previous_response_id lets OpenAI carry the conversation, so nothing is
stored locally.
"""

import logging
from typing import Optional

from openai import AsyncOpenAI

from .. import config

logger = logging.getLogger(__name__)

ASSISTANT_INSTRUCTIONS = """You are the CleanSync cleaning service assistant. Help clients with:
- Scheduling, modifying and cancelling cleaning appointments
- Supply requests and their supply checklist
- General questions about our services and booking policies
Cleanings are two-hour sessions, Monday to Friday between 9 AM and 5 PM.
Always be professional and courteous."""

_client: Optional[AsyncOpenAI] = None


def is_configured() -> bool:
    return bool(config.OPENAI_API_KEY)


def get_openai_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        if not config.OPENAI_API_KEY:
            raise RuntimeError("OPENAI_API_KEY not configured")
        _client = AsyncOpenAI(
            api_key=config.OPENAI_API_KEY,
            timeout=config.OPENAI_TIMEOUT_SECONDS,
            max_retries=0,
        )
        logger.info(f"🤖 Hosted assistant enabled (model={config.OPENAI_MODEL})")
    return _client


async def ask_assistant(message: str, thread_id: Optional[str] = None) -> dict:
    """
    Send one user message to the hosted assistant.

    Returns:
        {"message": assistant text, "threadId": id to continue the conversation}
    """
    client = get_openai_client()

    request = {
        "model": config.OPENAI_MODEL,
        "instructions": ASSISTANT_INSTRUCTIONS,
        "input": message,
    }
    if thread_id:
        request["previous_response_id"] = thread_id

    response = await client.responses.create(**request)

    text = response.output_text or "Unable to process response"
    return {"message": text, "threadId": response.id}
