from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx

from configs.config_ai import AIConfig

logger = logging.getLogger(__name__)
if AIConfig.DEBUG:
    logger.setLevel(logging.DEBUG)


def gemini_url(model: str, api_key: str) -> str:
    return f'{AIConfig.GEMINI_URL}/models/{model}:generateContent?key={api_key}'


def gemini_body(prompt: str) -> Dict[str, Any]:
    return {'contents': [{'parts': [{'text': prompt}]}]}


async def post_json(
    url: str,
    payload: Dict[str, Any],
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """
    POST a JSON body and return the decoded JSON response.

    Uses `client` when given (tests inject one with a mock transport), otherwise
    opens a short-lived client bounded by `timeout`.
    Raises httpx.HTTPError on transport errors, timeouts and non-2xx statuses,
    httpx.InvalidURL when the configured endpoint is malformed,
    and ValueError when the body is not JSON.
    """
    timeout = AIConfig.TIMEOUT_SECONDS if timeout is None else timeout
    # Query string may carry the API key
    logger.debug("POST %s", url.split("?")[0])
    if client is not None:
        resp = await client.post(url, json=payload, headers=headers, timeout=timeout)
    else:
        async with httpx.AsyncClient(timeout=timeout) as session:
            resp = await session.post(url, json=payload, headers=headers)
    resp.raise_for_status()
    return resp.json()
