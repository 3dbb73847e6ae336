from dotenv import load_dotenv
import os

load_dotenv()

# Full SQLAlchemy URL. When set, the DB_* parts below are ignored.
DB_URL = os.getenv("DB_URL")

DB_CONNECTION = os.getenv("DB_CONNECTION", "sqlite")
DB_DRIVER = os.getenv("DB_DRIVER", "pymysql")
DB_USERNAME = os.getenv("DB_USERNAME", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_HOST = os.getenv("DB_HOST", "127.0.0.1")
DB_PORT = os.getenv("DB_PORT", "3306")
DB_DATABASE = os.getenv("DB_DATABASE", "interview_prep")
