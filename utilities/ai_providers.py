from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import httpx

from configs.config_ai import AIConfig, QuestionRule
from database.models import InterviewQuestion
from utilities.ai_client import gemini_body, gemini_url, post_json
from utilities.ai_parsing import ProviderError, extract_gemini_text, extract_openai_text, normalize

logger = logging.getLogger(__name__)
if AIConfig.DEBUG:
    logger.setLevel(logging.DEBUG)

SYSTEM_PROMPT = (
    "You are an interview coach. You must return ONLY a valid JSON array of objects, "
    "with no extra text, prose, or markdown fences."
)


def build_prompt(topic: str, num_items: int = QuestionRule.QUESTION_COUNT) -> str:
    return (
        f"You are an interview coach. Generate {num_items} compact Q&A snippets for the role/topic \"{topic}\".\n"
        "Each item must be a JSON object with fields: \"question\", \"answer\", \"difficulty\" (Easy|Medium|Hard).\n"
        "Keep answers to 2-4 sentences. Return ONLY a JSON array, no prose, no markdown fences.\n"
    )


class AIProvider(ABC):
    """
    Base class for AI backends that generate interview questions.

    Subclasses set `name` and implement `generate`, which returns the usable
    questions (possibly an empty list) or raises ProviderError.
    """
    name = 'AI'

    def __init__(self, *, timeout: Optional[float] = None, client: Optional[httpx.AsyncClient] = None):
        self.timeout = AIConfig.TIMEOUT_SECONDS if timeout is None else timeout
        self.client = client

    @abstractmethod
    async def generate(self, topic: str) -> List[InterviewQuestion]:
        """Return the usable questions for `topic`, or raise ProviderError."""

    def __repr__(self):
        return f'{type(self).__name__}(name={self.name!r})'


class GeminiProvider(AIProvider):
    name = 'Gemini'

    def __init__(self, api_key: Optional[str] = None, models: Optional[Sequence[str]] = None, **kwargs):
        super().__init__(**kwargs)
        self.api_key = AIConfig.GEMINI_API_KEY if api_key is None else api_key
        self.models = list(models) if models is not None else list(AIConfig.GEMINI_MODELS)

    async def generate(self, topic: str) -> List[InterviewQuestion]:
        if not self.api_key:
            raise ProviderError(self.name, 'GEMINI_API_KEY is not set')
        if not self.models:
            raise ProviderError(self.name, 'no models configured')
        prompt = build_prompt(topic)
        logger.debug('[%s] prompt: %s', self.name, prompt)

        last = len(self.models) - 1
        for i, model in enumerate(self.models):
            try:
                logger.info("Generating questions for topic '%s' with Gemini model %s", topic, model)
                envelope = await post_json(gemini_url(model, self.api_key), gemini_body(prompt), timeout=self.timeout, client=self.client)
                parsed = normalize(extract_gemini_text(envelope), topic, self.name)
            except (httpx.HTTPError, httpx.InvalidURL, ValueError, ProviderError) as e:
                logger.warning("Gemini model %s failed for topic '%s': %r", model, topic, e)
                # Only the last model's failure reaches the caller
                if i == last:
                    if isinstance(e, ProviderError):
                        raise
                    raise ProviderError(self.name, f'model {model} failed: {e!r}') from e
                continue
            if parsed:
                logger.info("Generated %d questions for topic '%s' using Gemini model %s", len(parsed), topic, model)
                return parsed
            logger.warning("Empty response from Gemini model %s for topic '%s'", model, topic)
        return []


class OpenAIProvider(AIProvider):
    name = 'GPT'

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.api_key = AIConfig.OPENAI_API_KEY if api_key is None else api_key
        self.model = model or AIConfig.OPENAI_MODEL

    def _body(self, topic: str) -> dict:
        return {
            'model': self.model,
            'messages': [
                {'role': 'system', 'content': SYSTEM_PROMPT},
                {'role': 'user', 'content': build_prompt(topic)},
            ],
            'response_format': {'type': 'json_object'},
        }

    async def generate(self, topic: str) -> List[InterviewQuestion]:
        if not self.api_key:
            raise ProviderError(self.name, 'OPENAI_API_KEY is not set')
        logger.info("Generating questions for topic '%s' with GPT model %s", topic, self.model)
        try:
            envelope = await post_json(
                AIConfig.OPENAI_URL,
                self._body(topic),
                headers={'Authorization': f'Bearer {self.api_key}'},
                timeout=self.timeout,
                client=self.client,
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise ProviderError(self.name, f'request failed: {e!r}') from e
        parsed = normalize(extract_openai_text(envelope), topic, self.name)
        if parsed:
            logger.info("Generated %d questions for topic '%s' using GPT model %s", len(parsed), topic, self.model)
        return parsed


def default_providers() -> List[AIProvider]:
    """Providers in priority order."""
    return [GeminiProvider(), OpenAIProvider()]
