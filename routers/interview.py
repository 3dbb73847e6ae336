from fastapi import APIRouter, status
from pydantic import BaseModel, Field
from typing import Optional
from configs.config_ai import QuestionRule
from database.database import Db_dependency
from database.outputmodel import OutputInterviewQuestion
from routers.dependencies import Classifier_dep, Providers_dep
from utilities.interview import generate_questions

router = APIRouter(prefix="/interview-questions")


class GenerateQuestionsRequest(BaseModel):
    # Missing or null topic is rejected as blank (400), not as a validation error
    topic: Optional[str] = Field(default=None, max_length=QuestionRule.TOPIC_MAX_LENGTH)


@router.post('/api/interview/generate', response_model=list[OutputInterviewQuestion], status_code=status.HTTP_200_OK)
async def generate(req: GenerateQuestionsRequest, db: Db_dependency, classifier: Classifier_dep, providers: Providers_dep):
    """
    Generate interview questions for a technical topic.

    Rejected topics raise InvalidTopicError, turned into a plain-text 400 in main.py.
    """
    return await generate_questions(db, req.topic, classifier=classifier, providers=providers)
