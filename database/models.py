from sqlalchemy import Column, Integer, String, TIMESTAMP, func
from database.database import Base
from configs.config_ai import QuestionRule

class InterviewQuestion(Base):
    __tablename__ = "interview_questions"

    # _________Fields_____________
    id = Column(Integer, primary_key=True)
    topic = Column(String(QuestionRule.TOPIC_MAX_LENGTH), nullable=False, index=True)
    question = Column(String(QuestionRule.QUESTION_MAX_LENGTH), nullable=False)
    answer = Column(String(QuestionRule.ANSWER_MAX_LENGTH), nullable=False)
    difficulty = Column(String(10), nullable=False, default=QuestionRule.DEFAULT_DIFFICULTY)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    def __repr__(self):
        return f"InterviewQuestion(id={self.id!r}, topic={self.topic!r}, difficulty={self.difficulty!r})"
