import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from chatrelay.client.llm.completion import call_llm
from chatrelay.exceptions import BadRequest, UpstreamEmpty, UpstreamError
from chatrelay.model.chat.chat_response import ChatResponse
from chatrelay.model.chat.turn import Turn

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert AI assistant. Provide accurate, well-reasoned, and convincing answers. "
    "Back up your points with clear explanations and relevant details. "
    "Be thorough but concise. Focus on clarity and factual correctness in every response."
)


async def relay_service(message: Any, history: Any) -> ChatResponse:
    if not message or not isinstance(message, str):
        raise BadRequest()

    turns = sanitize_history(history)
    messages = build_prompt(message, turns)
    logger.info("relaying message history_turns=%s", len(turns))

    try:
        raw = await asyncio.to_thread(call_llm, messages)
    except Exception as exc:
        logger.exception("completion provider request failed")
        raise UpstreamError() from exc

    if raw is not None and not isinstance(raw, str):
        logger.error("completion provider returned non-text content type=%s", type(raw).__name__)
        raise UpstreamError()

    reply = (raw or "").strip()
    if not reply:
        logger.warning("completion provider returned an empty reply")
        raise UpstreamEmpty()

    return ChatResponse(reply=reply)


def sanitize_history(history: Any) -> list[Turn]:
    """
    Keep only well-formed turns, in their original order.

    A history that is not a list is treated as empty. Entries with an unknown
    role, non-string content, or that are not objects at all are dropped
    without failing the request.
    """
    if not isinstance(history, list):
        if history is not None:
            logger.info("ignoring history of type %s", type(history).__name__)
        return []

    turns: list[Turn] = []
    for entry in history:
        if not isinstance(entry, dict):
            continue
        try:
            turns.append(Turn.model_validate({"role": entry.get("role"), "content": entry.get("content")}))
        except ValidationError:
            continue

    dropped = len(history) - len(turns)
    if dropped:
        logger.info("dropped %s malformed history entries", dropped)
    return turns


def build_prompt(message: str, turns: list[Turn]) -> list[dict]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        *(turn.model_dump() for turn in turns),
        {"role": "user", "content": message},
    ]
