"""Single-line text editing for the query and filter panels."""

from __future__ import annotations


class LineEditor:
    """Editable one-line buffer with a caret position."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.caret = len(text)

    def set_text(self, text: str) -> None:
        self.text = text
        self.caret = len(text)

    def handle_key(self, key: str) -> bool:
        """Apply one editing key; return whether it was consumed."""
        if key == "LEFT":
            self.caret = max(0, self.caret - 1)
            return True
        if key == "RIGHT":
            self.caret = min(len(self.text), self.caret + 1)
            return True
        if key in {"HOME", "CTRL_A"}:
            self.caret = 0
            return True
        if key in {"END", "CTRL_E"}:
            self.caret = len(self.text)
            return True
        if key == "BACKSPACE":
            if self.caret > 0:
                self.text = self.text[: self.caret - 1] + self.text[self.caret :]
                self.caret -= 1
            return True
        if key == "DELETE":
            self.text = self.text[: self.caret] + self.text[self.caret + 1 :]
            return True
        if key == "CTRL_U":
            self.set_text("")
            return True
        if len(key) == 1 and key.isprintable():
            self.text = self.text[: self.caret] + key + self.text[self.caret :]
            self.caret += 1
            return True
        return False
