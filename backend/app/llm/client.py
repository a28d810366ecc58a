from typing import Protocol

from app.models.domain import TripContext


class ItineraryBackend(Protocol):
    def generate_itinerary(self, context: TripContext) -> str:
        ...


class LLMClient:
    """
    Pluggable LLM client abstraction. The mock backend writes a deterministic
    itinerary; swapping to a real model is a matter of implementing
    ItineraryBackend.generate_itinerary.
    """

    def __init__(self, backend: ItineraryBackend):
        self.backend = backend

    def generate(self, context: TripContext) -> str:
        return self.backend.generate_itinerary(context)
