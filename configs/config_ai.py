from typing import Literal
from dotenv import load_dotenv
import os

load_dotenv()

Difficulty = Literal['Easy', 'Medium', 'Hard']

# AI backend settings
class AIConfig:
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    GEMINI_URL = os.getenv("GEMINI_URL", "https://generativelanguage.googleapis.com/v1beta")
    # Tried in order, last failure propagates
    GEMINI_MODELS = [m.strip() for m in os.getenv("GEMINI_MODELS", "gemini-1.5-flash,gemini-1.5-flash-8b").split(",") if m.strip()]
    CLASSIFIER_MODEL = os.getenv("CLASSIFIER_MODEL", "gemini-1.5-flash")
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_URL = os.getenv("OPENAI_URL", "https://api.openai.com/v1/chat/completions")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "20"))
    GENERATOR_MODE = os.getenv("AI_GENERATOR_MODE", "hybrid").lower()
    DEBUG = os.getenv("DEBUG_AI", "") == "1"

# Question set constants
class QuestionRule:
    QUESTION_COUNT = 10
    FALLBACK_SIZE = 10
    TOPIC_MAX_LENGTH = 255
    QUESTION_MAX_LENGTH = 2000
    ANSWER_MAX_LENGTH = 4000
    DEFAULT_DIFFICULTY: Difficulty = 'Medium'
    INVALID_TOPIC_MESSAGE = "Failed to fetch questions. Please enter a programming or interview-related topic."
