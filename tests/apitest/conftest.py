import httpx
from httpx import ASGITransport, AsyncClient
import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from database.database import Base, get_db
from database import models
from routers.dependencies import getClassifier, getProviders
from utilities.topic import TopicClassifier
from main import app

@pytest.fixture(scope="package")
def connection(tmp_path_factory):
    db_file = tmp_path_factory.mktemp("data") / "api_test.db"
    engine = create_engine(f"sqlite:///{db_file}")
    yield engine
    engine.dispose()

@pytest.fixture(scope="class", autouse=True)
def setup_database(connection):
    Base.metadata.create_all(bind=connection)
    yield
    Base.metadata.drop_all(bind=connection)

@pytest.fixture(scope="package")
def mock_db(connection):
    SessionLocal = sessionmaker(bind=connection)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture(scope="function")
def providers():
    """Mutable provider list served to the app; tests fill it in."""
    return []

def unreachable(request):
    raise httpx.ConnectError("connection refused", request=request)

@pytest_asyncio.fixture(scope="function")
async def async_client(mock_db, providers):
    offline = AsyncClient(transport=httpx.MockTransport(unreachable))

    def override_get_db():
        yield mock_db

    async def override_get_providers():
        return providers

    async def override_get_classifier():
        # AI classifier unreachable: verdicts come from the keyword set
        return TopicClassifier(api_key="key", client=offline)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[getProviders] = override_get_providers
    app.dependency_overrides[getClassifier] = override_get_classifier
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
    await offline.aclose()
