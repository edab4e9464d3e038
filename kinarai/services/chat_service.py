# kinarai/services/chat_service.py

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from kinarai.models.response_models import ChatMessage, RecommendResponse
from kinarai.services.dispatcher import run_recommendation_branches
from kinarai.services.intent_classifier import ClassifiedIntent, LocationQuery, classify
from kinarai.services.response_formatter import format_assistant_reply

logger = logging.getLogger(__name__)

RECENT_MESSAGE_LIMIT = 5
ERROR_REPLY = "Sorry, something went wrong. Please try again."


class ChatTranscript:
    """Append-only list of chat messages for one client session."""

    def __init__(self, messages: Optional[Iterable[ChatMessage]] = None):
        self._messages: List[ChatMessage] = list(messages or [])

    def append(self, role: str, content: str) -> ChatMessage:
        message = ChatMessage(role=role, content=content)
        self._messages.append(message)
        return message

    def recent(self, limit: int = RECENT_MESSAGE_LIMIT) -> List[ChatMessage]:
        if limit <= 0:
            return []
        return self._messages[-limit:]

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self._messages)


@dataclass
class ChatResult:
    reply: ChatMessage
    response: RecommendResponse
    transcript: ChatTranscript


def request_from_intent(intent: ClassifiedIntent) -> Tuple[Optional[str], Optional[str]]:
    if isinstance(intent, LocationQuery):
        return intent.location or None, None
    return None, intent.food_type or None


def apply_display_rule(response: RecommendResponse) -> RecommendResponse:
    # cards show one kind at a time; restaurants win
    if response.restaurants:
        response.foods = None
    return response


def handle_chat_message(service, text: str, transcript: ChatTranscript, timeout: float = 120) -> ChatResult:
    transcript.append("user", text)

    location, food_type = request_from_intent(classify(text))
    logger.info("Chat request with location: %s, foodType: %s", location or "none", food_type or "none")

    if not (location or food_type):
        response = RecommendResponse()
    else:
        try:
            response = run_recommendation_branches(service, location, food_type, timeout=timeout)
        except Exception:
            logger.exception("Chat request failed")
            reply = transcript.append("assistant", ERROR_REPLY)
            return ChatResult(reply=reply, response=RecommendResponse(), transcript=transcript)

    response = apply_display_rule(response)
    reply = transcript.append("assistant", format_assistant_reply(response, location, food_type))
    return ChatResult(reply=reply, response=response, transcript=transcript)
