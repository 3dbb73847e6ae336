from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from configs.config_ai import AIConfig, QuestionRule
from database.models import InterviewQuestion
from utilities.ai_parsing import ProviderError
from utilities.ai_providers import AIProvider
from utilities.fallback import build_fallback
from utilities.topic import TopicClassifier, normalize_topic

logger = logging.getLogger(__name__)


class InvalidTopicError(ValueError):
    def __init__(self, topic: str, message: str = QuestionRule.INVALID_TOPIC_MESSAGE):
        super().__init__(message)
        self.topic = topic
        self.message = message


@dataclass
class ProviderOutcome:
    provider: str
    questions: List[InterviewQuestion] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and len(self.questions) > 0


async def try_provider(provider: AIProvider, topic: str) -> ProviderOutcome:
    """
    Run one provider and capture its result.

    Only ProviderError is captured; anything else is a bug and propagates.
    """
    try:
        questions = await provider.generate(topic)
    except ProviderError as e:
        return ProviderOutcome(provider.name, error=e)
    return ProviderOutcome(provider.name, questions=list(questions or []))


def save_questions(db: Session, questions: List[InterviewQuestion]) -> bool:
    """
    Batch insert generated questions.

    Best effort: on failure the session is rolled back, the error is logged and
    False is returned so the caller can still hand the questions out.
    """
    try:
        db.add_all(questions)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        # Keys assigned by the failed flush point at rows that no longer exist
        for q in questions:
            q.id = None
        logger.error("Failed to persist %d questions for topic '%s': %s",
                     len(questions), questions[0].topic if questions else '', e)
        return False
    return True


async def generate_questions(
    db: Session,
    topic: Optional[str],
    *,
    classifier: TopicClassifier,
    providers: Sequence[AIProvider],
    mode: Optional[str] = None,
) -> List[InterviewQuestion]:
    """
    Generate interview questions for a topic.

    Params:
        db: Database session object
        topic: Free-text topic, trimmed before use
        classifier: Decides whether the topic is technical
        providers: AI backends, tried in order until one returns questions
        mode: 'hybrid' (providers then fallback) or 'local' (fallback only). Defaults to AI_GENERATOR_MODE.

    Returns:
        list[InterviewQuestion]: never empty, persisted exactly once.

    Raises:
        InvalidTopicError: topic is blank or not recognised as technical.
    """
    safe_topic = normalize_topic(topic)
    if not await classifier.is_recognized_topic(safe_topic):
        raise InvalidTopicError(safe_topic)

    mode = (mode or AIConfig.GENERATOR_MODE).lower()
    logger.info("Generating questions for topic '%s' (mode=%s)", safe_topic, mode)

    if mode != 'local':
        for provider in providers:
            outcome = await try_provider(provider, safe_topic)
            if outcome.ok:
                save_questions(db, outcome.questions)
                return outcome.questions
            if outcome.error is not None:
                logger.warning("Provider '%s' failed for topic '%s'. Trying next provider. Error: %s",
                               outcome.provider, safe_topic, outcome.error)
            else:
                logger.warning("Provider '%s' returned no usable questions for topic '%s'. Trying next provider.",
                               outcome.provider, safe_topic)
        logger.error("All AI providers failed. Returning topic-aware fallback for: %s", safe_topic)

    fallback = build_fallback(safe_topic)
    save_questions(db, fallback)
    return fallback
