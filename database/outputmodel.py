"""
This module contains Output Models.\n
Output models expose the fields of DB Models that are sent to the client.\n
"""
from pydantic import BaseModel, ConfigDict

class OutputInterviewQuestion(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None
    topic: str
    question: str
    answer: str
    difficulty: str
