from __future__ import annotations


NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
    "tab": "\t",
    "return": "\r",
}

CHAR_NAMES: dict[str, str] = {ch: name for name, ch in NAMED_CHARS.items()}


class Character:
    """A single Unicode character, distinct from a one-character string."""

    __slots__ = ("ch",)

    def __init__(self, ch: str):
        if len(ch) != 1:
            raise ValueError(f"Character needs exactly one code point, got {ch!r}")
        self.ch = ch

    @property
    def code(self) -> int:
        return ord(self.ch)

    def __eq__(self, other: object) -> bool:
        return type(other) is Character and self.ch == other.ch

    def __hash__(self) -> int:
        return hash(("#\\", self.ch))

    def __repr__(self):
        return f"Character({self.ch!r})"

    def __str__(self):
        return "#\\" + CHAR_NAMES.get(self.ch, self.ch)
