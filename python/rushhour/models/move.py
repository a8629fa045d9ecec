"""Move commands and their compact token notation (``X>2``, ``Bv1``)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rushhour.models.cell import Direction

TOKEN_RE = re.compile(r"^\s*([A-Za-z0-9]+)([<>^vV])(\d+)\s*$")

_ARROWS = {
    "<": Direction.LEFT,
    ">": Direction.RIGHT,
    "^": Direction.UP,
    "v": Direction.DOWN,
}
_SYMBOLS = {d: s for s, d in _ARROWS.items()}


@dataclass(frozen=True)
class Move:
    vehicle: str
    direction: Direction
    amount: int

    @classmethod
    def parse(cls, token: str) -> Move:
        """Parse one ``<id><arrow><amount>`` token, e.g. ``"Zv2"``."""
        match = TOKEN_RE.match(token)
        if match is None:
            raise ValueError(f"Bad move token {token!r}.")
        # The id is matched greedily, so in "Bvv1" the id is "Bv".
        vehicle, arrow, amount = match.groups()
        if arrow == "V":
            arrow = "v"
        return cls(vehicle, _ARROWS[arrow], int(amount))

    @classmethod
    def parse_sequence(cls, text: str) -> list[Move]:
        """Parse a comma-separated sequence such as ``"Bv2,A>1"``."""
        text = text.replace("\n", " ")
        return [cls.parse(part) for part in text.split(",") if part.strip()]

    def __str__(self) -> str:
        return f"{self.vehicle}{_SYMBOLS[self.direction]}{self.amount}"
