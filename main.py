from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
import logging

from configs.config_ai import AIConfig
from configs.config_app import APP_ENV, CORS_ORIGINS
from routers import interview
from utilities.interview import InvalidTopicError

env = APP_ENV

logging.basicConfig(
    level=logging.DEBUG if AIConfig.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if env != "test":
        from database import database
        logger.info("Creating tables (env=%s)", env)
        # Drop all tables if this is dev env
        database.create_db_and_tables(env == "development")
    yield

app = FastAPI(lifespan=lifespan, debug= env != 'production')

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(interview.router)

@app.exception_handler(InvalidTopicError)
async def invalid_topic_handler(request: Request, exc: InvalidTopicError):
    logger.info("Rejected topic '%s'", exc.topic)
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)
