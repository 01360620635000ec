"""Raw argument access for commands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

__all__ = ["CommandArguments"]

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_FLAG_PATTERN = re.compile(r"-([a-zA-Z])")


@dataclass
class CommandArguments:
    """Positional tokens and single-letter flags of one invocation.

    Flags are collected but not interpreted here.
    """

    tokens: list[str] = field(default_factory=list)
    flags: set[str] = field(default_factory=set)

    @classmethod
    def parse(cls, raw: list[str] | str) -> CommandArguments:
        """Split raw words into tokens and `-x` flags.

        Negative numbers stay positional. "--" ends flag parsing.
        Blank words are dropped.
        """
        words = raw.split() if isinstance(raw, str) else [word for word in raw if word.strip()]
        tokens: list[str] = []
        flags: set[str] = set()
        parsing_flags = True
        for word in words:
            if parsing_flags and word == "--":
                parsing_flags = False
                continue
            match = _FLAG_PATTERN.fullmatch(word) if parsing_flags else None
            if match:
                flags.add(match.group(1))
            else:
                tokens.append(word)
        return cls(tokens=tokens, flags=flags)

    def __len__(self) -> int:
        return len(self.tokens)

    def get_string(self, index: int) -> str:
        """Return the token at `index`."""
        return self.tokens[index]

    def get_integer(self, index: int) -> int:
        """Return the token at `index` as an integer.

        Raises:
            ValueError: if the token is not a plain decimal integer
        """
        token = self.tokens[index].strip()
        if not _INTEGER_PATTERN.fullmatch(token):
            msg = f"'{token}' is not a number"
            raise ValueError(msg)
        return int(token)

    def has_flag(self, flag: str) -> bool:
        """Return True if `-flag` was given."""
        return flag in self.flags
