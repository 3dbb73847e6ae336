from __future__ import annotations
import json
import logging
import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from configs.config_ai import AIConfig, QuestionRule
from database.models import InterviewQuestion

logger = logging.getLogger(__name__)
if AIConfig.DEBUG:
    logger.setLevel(logging.DEBUG)

_CANONICAL_DIFFICULTY = {'easy': 'Easy', 'medium': 'Medium', 'hard': 'Hard'}


class ProviderError(Exception):
    """A provider call or its response parsing failed."""

    def __init__(self, provider: str, message: str):
        super().__init__(f'{provider}: {message}')
        self.provider = provider


# =========================
# Envelope extraction
# =========================
def extract_gemini_text(envelope: Any) -> str:
    """Return candidates[0].content.parts[0].text, or '' when the shape does not match."""
    try:
        text = envelope['candidates'][0]['content']['parts'][0]['text']
    except (KeyError, IndexError, TypeError) as e:
        logger.error('Unexpected Gemini response structure (%r): %s', e, str(envelope)[:500])
        return ''
    return text if isinstance(text, str) else ''


def extract_openai_text(envelope: Any) -> str:
    """Return choices[0].message.content, or '' when the shape does not match."""
    try:
        text = envelope['choices'][0]['message']['content']
    except (KeyError, IndexError, TypeError) as e:
        logger.error('Unexpected GPT response structure (%r): %s', e, str(envelope)[:500])
        return ''
    return text if isinstance(text, str) else ''


def strip_code_fences(s: str) -> str:
    if not s:
        return ''
    s2 = s.strip()
    s2 = re.sub(r"^```[a-zA-Z0-9_-]*\s*", "", s2)
    s2 = re.sub(r"\s*```$", "", s2)
    return s2.strip()


# =========================
# Item parsing
# =========================
class GeneratedItem(BaseModel):
    model_config = ConfigDict(extra='ignore')

    question: str = ''
    answer: str = ''
    difficulty: Optional[str] = None

    @field_validator('question', 'answer', mode='before')
    @classmethod
    def _text(cls, v: Any) -> str:
        if v is None:
            return ''
        return str(v).strip()

    @field_validator('difficulty', mode='before')
    @classmethod
    def _difficulty(cls, v: Any) -> str:
        if v is None:
            return QuestionRule.DEFAULT_DIFFICULTY
        return _CANONICAL_DIFFICULTY.get(str(v).strip().lower(), QuestionRule.DEFAULT_DIFFICULTY)


def parse_items(text: str, provider: str) -> List[Any]:
    """
    Decode the cleaned model output into a list of raw items.

    Accepts a bare JSON array, or an object whose first array-valued field
    holds the items (e.g. {"questions": [...]}).
    Raises ProviderError when the text is not JSON or is some other JSON value.
    """
    cleaned = strip_code_fences(text)
    if not cleaned:
        return []
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ProviderError(provider, f'output is not valid JSON: {e}') from e
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict):
        return next((v for v in parsed.values() if isinstance(v, list)), [])
    raise ProviderError(provider, f'unexpected JSON value of type {type(parsed).__name__}')


def to_questions(items: List[Any], topic: str) -> List[InterviewQuestion]:
    """Map raw items to InterviewQuestion rows, dropping any without a question or answer."""
    out: List[InterviewQuestion] = []
    for raw in items:
        if not isinstance(raw, dict):
            continue
        try:
            item = GeneratedItem.model_validate(raw)
        except ValidationError:
            continue
        if not item.question or not item.answer:
            continue
        out.append(InterviewQuestion(
            topic=topic,
            question=item.question[:QuestionRule.QUESTION_MAX_LENGTH],
            answer=item.answer[:QuestionRule.ANSWER_MAX_LENGTH],
            difficulty=item.difficulty or QuestionRule.DEFAULT_DIFFICULTY,
        ))
    return out


def normalize(text: str, topic: str, provider: str) -> List[InterviewQuestion]:
    if AIConfig.DEBUG:
        logger.debug('[%s] raw output: %s', provider, (text or '')[:2000])
    return to_questions(parse_items(text, provider), topic)
