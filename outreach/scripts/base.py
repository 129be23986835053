"""Conversation script definition.

A script is a pair of pure render functions plus the placeholders used
when a customer field is unknown. Scripts hold no state; rendering the
same inputs always yields the same text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from outreach.models.call import Language

OpeningFn = Callable[[str, Optional[str], Optional[str]], str]
InstructionsFn = Callable[[str, str, str], str]

# Serviced cities and budget bands quoted by the agent in every language.
CITIES = "Mumbai, Pune, Nashik, Nagpur, Lonavala, Alibaug, Panchgani"

AGENT_NAME = "Purva"
COMPANY = "Purva Real Estate"


@dataclass(frozen=True)
class RenderedScript:
    """Text handed to the voice agent for one call."""

    opening: str
    instructions: str


@dataclass(frozen=True)
class ConversationScript:
    """Language-specific opening line and agent instructions.

    ``opening`` receives the customer name (placeholder already applied)
    and the raw area/budget, so it can leave out clauses it knows nothing
    about. ``instructions`` always receives all three values with
    placeholders applied.
    """

    language: Language
    name_placeholder: str
    area_placeholder: str
    budget_placeholder: str
    opening: OpeningFn
    instructions: InstructionsFn

    def display_name(self, customer_name: str | None) -> str:
        return customer_name or self.name_placeholder

    def render(
        self,
        customer_name: str | None = None,
        preferred_area: str | None = None,
        budget: str | None = None,
    ) -> RenderedScript:
        name = self.display_name(customer_name)
        return RenderedScript(
            opening=self.opening(name, preferred_area or None, budget or None),
            instructions=self.instructions(
                name,
                preferred_area or self.area_placeholder,
                budget or self.budget_placeholder,
            ),
        )
