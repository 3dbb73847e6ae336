from sqlalchemy import create_engine
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from fastapi import Depends
from typing import Annotated
from configs.config_db import *
import logging
import os

logger = logging.getLogger(__name__)

def buildUrl() -> str:
    if DB_URL:
        return DB_URL
    if DB_CONNECTION == "sqlite":
        return "sqlite:///" + DB_DATABASE + ".db"
    return DB_CONNECTION + '+' + DB_DRIVER + '://'\
        + DB_USERNAME + ':' + DB_PASSWORD\
        + '@' + DB_HOST + ':' + DB_PORT\
        + '/' + DB_DATABASE

def createConnection():
    url = buildUrl()
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    elif os.getenv("DB_SSL_CA"):
        connect_args["ssl_ca"] = os.path.abspath(os.getenv("DB_SSL_CA"))
    try:
        return create_engine(url, connect_args=connect_args)
    except (ArgumentError, ImportError) as e:
        # Missing driver or malformed URL: tests bind their own engine
        logger.error("Cannot create database engine: %s", e)
        return None

engine = createConnection()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def create_db_and_tables(drop: bool = False):
    # Clear all database in dev env
    if drop:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

Db_dependency = Annotated[Session, Depends(get_db)]
