"""
Travel Advisor
Asks an OpenAI chat model for short, free-text travel advice grounded in the
computed air quality, congestion, and health score
"""

import logging
from typing import Optional

from openai import OpenAI

from config.settings import Settings
from utils.constants import ADVICE_PROMPT_TEMPLATE

logger = logging.getLogger(__name__)


class TravelAdvisor:
    """
    Generates natural-language advice for a user's travel question

    Errors from the chat completion call propagate to the caller; the request
    handler treats them like any other upstream failure.
    """

    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        """
        Args:
            settings: Settings providing the API key, model, and timeout
            client: Pre-built OpenAI client, created from settings if omitted
        """
        self.model = settings.OPENAI_MODEL
        self._client = client
        self._settings = settings

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=self._settings.OPENAI_API_KEY,
                timeout=self._settings.OPENAI_TIMEOUT,
                max_retries=0,
            )
        return self._client

    @staticmethod
    def build_prompt(
        question: str,
        aqi: Optional[int],
        congestion_percent: Optional[float],
        overall_health: Optional[float],
    ) -> str:
        """Embed the question and the computed figures in the prompt"""
        return ADVICE_PROMPT_TEMPLATE.format(
            question=question,
            aqi=aqi,
            congestion=congestion_percent,
            overall=overall_health,
        )

    def get_advice(
        self,
        question: str,
        aqi: Optional[int],
        congestion_percent: Optional[float],
        overall_health: Optional[float],
    ) -> Optional[str]:
        """
        Get advice for a travel question

        Args:
            question: The user's question
            aqi: Air Quality Index used for scoring
            congestion_percent: Congestion used for scoring
            overall_health: Overall health score

        Returns:
            Advice text, or None if the model returned no content
        """
        prompt = self.build_prompt(question, aqi, congestion_percent, overall_health)

        chat_completion = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": prompt
                }
            ],
        )

        if not chat_completion.choices:
            logger.warning("Chat completion returned no choices")
            return None

        content = chat_completion.choices[0].message.content
        return content.strip() if content else None
