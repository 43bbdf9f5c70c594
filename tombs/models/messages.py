from typing import Iterator, List, Tuple

from .colors import Color, WHITE

Message = Tuple[str, Color]


class MessageLog:
    """Append-only list of ``(text, color)`` entries.

    Unbounded; consumers that show a window of it use ``tail``.
    """

    def __init__(self):
        self._messages: List[Message] = []

    def add(self, text: str, color: Color = WHITE) -> None:
        self._messages.append((str(text), color))

    def tail(self, n: int) -> List[Message]:
        if n <= 0:
            return []
        return self._messages[-n:]

    @property
    def last(self) -> str | None:
        return self._messages[-1][0] if self._messages else None

    def texts(self) -> List[str]:
        return [text for text, _ in self._messages]

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)
