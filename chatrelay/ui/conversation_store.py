import logging
from typing import Awaitable, Callable, Optional

from chatrelay.exceptions import NetworkError
from chatrelay.model.chat.turn import Turn
from chatrelay.ui.formatter import format_message

logger = logging.getLogger(__name__)

GREETING = "👋 Xin chào! Tôi là trợ lý AI của bạn. Hãy hỏi tôi bất kỳ câu hỏi nào!"
FALLBACK_REPLY = "Xin lỗi, hiện tôi không thể trả lời."
CONNECTION_ERROR = "⚠️ Lỗi kết nối đến server. Thử lại sau."

SendFn = Callable[[str, list[dict]], Awaitable[Optional[str]]]


class ConversationStore:
    """
    Client-side owner of the current conversation.

    The whole conversation lives here and is resent with every exchange; the
    relay keeps nothing between requests. Only one exchange may be in flight
    at a time.
    """

    def __init__(self, send: SendFn, greeting: str = GREETING):
        self._send = send
        self._greeting = greeting
        self._turns: list[Turn] = [self._greeting_turn()]
        self._generation = 0
        self.input = ""
        self.error = ""
        self.loading = False

    def _greeting_turn(self) -> Turn:
        return Turn(role="assistant", content=self._greeting)

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def snapshot(self) -> list[dict]:
        return [turn.model_dump() for turn in self._turns]

    def render(self) -> list[tuple[str, str]]:
        return [(turn.role, format_message(turn.content)) for turn in self._turns]

    async def submit(self, text: Optional[str] = None) -> bool:
        """Run one exchange. Returns False when the submission was ignored."""
        if text is None:
            text = self.input
        if not text.strip() or self.loading:
            return False

        history = self.snapshot()
        self._turns.append(Turn(role="user", content=text))
        self.input = ""
        self.error = ""
        self.loading = True
        generation = self._generation

        try:
            reply = await self._send(text, history)
        except NetworkError:
            logger.warning("exchange failed, keeping %s turns", len(self._turns))
            if generation == self._generation:
                self.error = CONNECTION_ERROR
            return False
        finally:
            self.loading = False

        # A reset while waiting started a new conversation; this reply belongs to the old one.
        if generation != self._generation:
            return False

        self._turns.append(Turn(role="assistant", content=reply or FALLBACK_REPLY))
        return True

    def reset(self) -> None:
        self._generation += 1
        self._turns = [self._greeting_turn()]
        self.input = ""
        self.error = ""

    def dismiss_error(self) -> None:
        self.error = ""
