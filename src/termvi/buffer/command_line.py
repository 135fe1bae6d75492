"""Accumulator for the colon command being typed in Command mode."""

from __future__ import annotations

from typing import List

PROMPT = ":"


class CommandLineBuffer:
    def __init__(self) -> None:
        self._chars: List[str] = []

    @property
    def text(self) -> str:
        """Everything typed so far, prompt included."""

        return "".join(self._chars)

    @property
    def command(self) -> str:
        """The command proper, without the leading prompt character."""

        text = self.text
        if text.startswith(PROMPT):
            return text[len(PROMPT) :]
        return text

    @property
    def cursor_column(self) -> int:
        return len(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def seed(self, prompt: str = PROMPT) -> None:
        self._chars = list(prompt)

    def put(self, ch: str) -> None:
        self._chars.append(ch)

    def backspace(self) -> bool:
        if not self._chars:
            return False
        self._chars.pop()
        return True

    def reset(self) -> None:
        self._chars.clear()


__all__ = ["CommandLineBuffer", "PROMPT"]
