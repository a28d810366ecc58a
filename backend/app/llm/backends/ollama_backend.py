from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import requests

from app.core.config import settings
from app.llm.client import ItineraryBackend
from app.llm.prompts import PLANNER_SYSTEM_PROMPT, build_itinerary_prompt
from app.models.domain import TripContext

logger = logging.getLogger(__name__)


@dataclass
class OllamaItineraryBackend(ItineraryBackend):
    """
    Itinerary backend using Ollama's chat API.
    The model's reply is returned as-is; parsing happens when the trip is viewed.
    """

    host: str = settings.ollama_host
    model: str = settings.ollama_model
    timeout: int = settings.ollama_timeout

    def _build_messages(self, context: TripContext) -> List[dict]:
        return [
            {"role": "system", "content": PLANNER_SYSTEM_PROMPT},
            {"role": "user", "content": build_itinerary_prompt(context)},
        ]

    def generate_itinerary(self, context: TripContext) -> str:
        payload = {
            "model": self.model,
            "messages": self._build_messages(context),
            "stream": False,
            "options": {"num_predict": settings.llm_max_tokens},
        }
        try:
            resp = requests.post(
                f"{self.host}/api/chat", json=payload, timeout=self.timeout
            )
            resp.raise_for_status()
        except Exception as exc:  # noqa: BLE001
            logger.error("Ollama request failed: %s", exc)
            raise

        content = resp.json().get("message", {}).get("content", "")
        if not content.strip():
            logger.error("Empty itinerary from model %s", self.model)
            raise ValueError("LLM returned an empty itinerary")
        return content
