import json
import httpx
import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from database.database import Base
from database import models

@pytest.fixture(scope="package", autouse=True)
def connection(tmp_path_factory):
    db_file = tmp_path_factory.mktemp("data") / "unit_test.db"
    engine = create_engine(f"sqlite:///{db_file}")
    yield engine
    engine.dispose()

@pytest.fixture(scope="class", autouse=True)
def setup_database(connection):
    Base.metadata.create_all(bind=connection)
    yield
    Base.metadata.drop_all(bind=connection)

@pytest.fixture(scope="package", autouse=True)
def mock_db(connection):
    # Setup database
    SessionLocal = sessionmaker(bind=connection)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def sample_items():
    def build(n: int = 10, topic: str = "Kubernetes"):
        levels = ["Easy", "Medium", "Hard"]
        return [
            {
                "question": f"Question {i + 1} about {topic}?",
                "answer": f"Answer {i + 1}. It explains a {topic} concept in two sentences.",
                "difficulty": levels[i % 3],
            }
            for i in range(n)
        ]
    return build

@pytest.fixture(scope="function")
def gemini_envelope():
    def build(text: str):
        return {
            "candidates": [
                {
                    "content": {"parts": [{"text": text}], "role": "model"},
                    "finishReason": "STOP",
                    "index": 0,
                }
            ],
            "modelVersion": "gemini-1.5-flash",
        }
    return build

@pytest.fixture(scope="function")
def openai_envelope():
    def build(text: str):
        return {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": text},
                    "finish_reason": "stop",
                }
            ],
        }
    return build

@pytest_asyncio.fixture(scope="function")
async def mock_client():
    """
    Factory for httpx clients backed by a handler instead of the network.
    Every request seen is recorded on the returned client as `.seen`.
    """
    clients = []

    def build(handler):
        seen = []

        def record(request: httpx.Request):
            seen.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(record))
        client.seen = seen
        clients.append(client)
        return client

    yield build
    for client in clients:
        await client.aclose()

@pytest.fixture(scope="function")
def json_response():
    def build(data, status_code: int = 200):
        return httpx.Response(status_code, content=json.dumps(data).encode(), headers={"content-type": "application/json"})
    return build
