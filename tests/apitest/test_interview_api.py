import json
import httpx
import pytest
from database.models import InterviewQuestion
from utilities.ai_providers import GeminiProvider, OpenAIProvider

URL = "/interview-questions/api/interview/generate"
INVALID_MESSAGE = "Failed to fetch questions. Please enter a programming or interview-related topic."

def timing_out(request):
    raise httpx.ReadTimeout("timed out", request=request)

def gpt_returning(items):
    body = {"choices": [{"index": 0, "message": {"role": "assistant", "content": json.dumps({"questions": items})}}]}
    return lambda request: httpx.Response(200, json=body)

def sample_items(n, topic):
    levels = ["Easy", "Medium", "Hard"]
    return [
        {"question": f"Question {i + 1} about {topic}?", "answer": f"Answer {i + 1} about {topic}.", "difficulty": levels[i % 3]}
        for i in range(n)
    ]

@pytest.mark.usefixtures("setup_database")
class TestInterviewApi:

    @pytest.mark.asyncio
    async def test_first_provider_times_out(self, async_client, providers, mock_db):
        gemini_http = httpx.AsyncClient(transport=httpx.MockTransport(timing_out))
        gpt_http = httpx.AsyncClient(transport=httpx.MockTransport(gpt_returning(sample_items(10, "Kubernetes"))))
        providers.extend([
            GeminiProvider(api_key="key", models=["gemini-a", "gemini-b"], client=gemini_http),
            OpenAIProvider(api_key="sk-test", client=gpt_http),
        ])

        res = await async_client.post(URL, json={"topic": "Kubernetes"})

        assert res.status_code == 200
        data = res.json()
        assert len(data) == 10
        assert [d["question"] for d in data] == [f"Question {i + 1} about Kubernetes?" for i in range(10)]
        for d in data:
            assert set(d.keys()) == {"id", "topic", "question", "answer", "difficulty"}
            assert d["id"] is not None
            assert d["topic"] == "Kubernetes"
        assert mock_db.query(InterviewQuestion).filter(InterviewQuestion.topic == "Kubernetes").count() == 10

        await gemini_http.aclose()
        await gpt_http.aclose()

    @pytest.mark.asyncio
    async def test_non_technical_topic(self, async_client, mock_db):
        before = mock_db.query(InterviewQuestion).count()

        res = await async_client.post(URL, json={"topic": "underwater basket weaving"})

        assert res.status_code == 400
        assert res.text == INVALID_MESSAGE
        assert res.headers["content-type"].startswith("text/plain")
        assert mock_db.query(InterviewQuestion).count() == before

    @pytest.mark.asyncio
    async def test_blank_or_missing_topic(self, async_client):
        for body in [{"topic": "   "}, {"topic": ""}, {"topic": None}, {}]:
            res = await async_client.post(URL, json=body)
            assert res.status_code == 400
            assert res.text == INVALID_MESSAGE

    @pytest.mark.asyncio
    async def test_too_long_topic(self, async_client):
        res = await async_client.post(URL, json={"topic": "k" * 300})
        assert res.status_code == 422

    @pytest.mark.asyncio
    async def test_fallback_when_providers_fail(self, async_client, providers):
        failing = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(500)))
        providers.extend([
            GeminiProvider(api_key="key", models=["gemini-a"], client=failing),
            OpenAIProvider(api_key="sk-test", client=failing),
        ])

        res = await async_client.post(URL, json={"topic": "python"})

        assert res.status_code == 200
        data = res.json()
        assert len(data) == 10
        assert data[0]["question"] == "What is python and where is it used?"
        assert {d["difficulty"] for d in data} == {"Easy", "Medium", "Hard"}
        await failing.aclose()

    @pytest.mark.asyncio
    async def test_cors(self, async_client):
        res = await async_client.options(URL, headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        })
        assert res.status_code == 200
        assert res.headers["access-control-allow-origin"] in ("*", "http://localhost:5173")
