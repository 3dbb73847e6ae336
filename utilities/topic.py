from __future__ import annotations
import logging
from typing import FrozenSet, Optional

import httpx

from configs.config_ai import AIConfig
from configs.config_keywords import VALID_KEYWORDS
from utilities.ai_client import gemini_body, gemini_url, post_json

logger = logging.getLogger(__name__)


class ClassificationUnavailable(Exception):
    """The AI classifier could not produce a verdict."""


def normalize_topic(topic: Optional[str]) -> str:
    return '' if topic is None else topic.strip()


def build_classification_prompt(topic: str) -> str:
    return f"Classify this topic: '{topic}'. Is it related to programming or not? Answer with 'Yes' or 'No'."


def is_known_keyword(topic: str, keywords: FrozenSet[str] = VALID_KEYWORDS) -> bool:
    return topic.strip().lower() in keywords


class TopicClassifier:
    """
    Decides whether a topic is technical enough to generate interview questions for.

    Asks the classification model for a yes/no verdict and falls back to the
    static keyword set whenever that call cannot be completed.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        *,
        keywords: FrozenSet[str] = VALID_KEYWORDS,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = AIConfig.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or AIConfig.CLASSIFIER_MODEL
        self.keywords = keywords
        self.timeout = timeout
        self.client = client

    async def ask_model(self, topic: str) -> bool:
        """Raises ClassificationUnavailable when no verdict can be read."""
        if not self.api_key:
            raise ClassificationUnavailable('GEMINI_API_KEY is not set')
        try:
            envelope = await post_json(
                gemini_url(self.model, self.api_key),
                gemini_body(build_classification_prompt(topic)),
                timeout=self.timeout,
                client=self.client,
            )
            text = envelope['candidates'][0]['content']['parts'][0]['text']
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, KeyError, IndexError, TypeError) as e:
            raise ClassificationUnavailable(repr(e)) from e
        if not isinstance(text, str):
            raise ClassificationUnavailable(f'verdict is {type(text).__name__}, not text')
        return 'yes' in text.strip().lower()

    async def is_recognized_topic(self, topic: Optional[str]) -> bool:
        topic = normalize_topic(topic)
        if not topic:
            return False
        try:
            return await self.ask_model(topic)
        except ClassificationUnavailable as e:
            logger.warning("AI topic classification failed for '%s': %s. Falling back to static keyword check.", topic, e)
            return is_known_keyword(topic, self.keywords)
