from typing import Annotated, List

from fastapi import Depends

from utilities.ai_providers import AIProvider, default_providers
from utilities.topic import TopicClassifier

async def getProviders() -> List[AIProvider]:
    """
    AI providers in the order they are tried.

    Returns:
        list[AIProvider]: Gemini first, then GPT.
    """
    return default_providers()

async def getClassifier() -> TopicClassifier:
    return TopicClassifier()


Providers_dep = Annotated[List[AIProvider], Depends(getProviders)]
Classifier_dep = Annotated[TopicClassifier, Depends(getClassifier)]
