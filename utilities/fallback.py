from typing import List
from configs.config_ai import QuestionRule
from database.models import InterviewQuestion

# (question template, answer template, difficulty); "{t}" is replaced by the topic
TEMPLATES = [
    ("What is {t} and where is it used?",
     "Give a concise definition and two core use cases. Mention when you’d choose {t} over alternatives.",
     "Easy"),
    ("List the core concepts or building blocks of {t}.",
     "Outline 4–6 key components with one‑line explanations so an interviewer sees breadth quickly.",
     "Easy"),
    ("How do you structure a small project in {t}?",
     "Describe a sensible folder/module layout, dependency management, configuration handling, and environment setup.",
     "Medium"),
    ("How do you handle errors and logging in {t}?",
     "Explain error types, when to fail fast, logging levels, correlation IDs, and basic monitoring.",
     "Medium"),
    ("What are common pitfalls in {t} and how do you avoid them?",
     "Name 3–5 pitfalls and a mitigation for each so you show practical experience.",
     "Medium"),
    ("How would you improve performance in {t}?",
     "Cover profiling, caching, I/O strategy, and data‑structure choices that matter most.",
     "Hard"),
    ("What are key security considerations for {t}?",
     "Discuss input validation, authentication/authorization, secrets management, and common vulnerabilities.",
     "Hard"),
    ("How do you test {t} effectively?",
     "Clarify unit vs integration tests, mocking/fakes, minimal test data, and CI basics.",
     "Easy"),
    ("Design a production‑ready {t} service.",
     "Talk through scalability, observability, configuration, zero‑downtime deploys, and rollback strategy.",
     "Hard"),
    ("What recent trends or tools matter in the {t} ecosystem?",
     "Mention two current tools or practices and why they’re useful in real projects.",
     "Medium"),
]
assert len(TEMPLATES) == QuestionRule.FALLBACK_SIZE


def build_fallback(topic: str) -> List[InterviewQuestion]:
    """
    Topic-aware question set used when no AI provider returns anything usable.

    Deterministic: the same topic always yields the same ten questions.
    """
    t = topic.strip() if topic and topic.strip() else "your topic"
    return [
        InterviewQuestion(topic=t, question=q.format(t=t), answer=a.format(t=t), difficulty=d)
        for q, a, d in TEMPLATES
    ]
