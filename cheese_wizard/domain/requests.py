"""Plain request values consumed by the cheese operations.

The HTTP layer decodes its payloads into these; the operations never see
the wire format.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheeseRatingRequest:
    rating: int
    cheese: str


@dataclass(frozen=True)
class NewCheeseRequest:
    name: str
