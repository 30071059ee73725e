import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"

SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))

# IANA zone for persisted idea dates; empty means the host's local zone
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "").strip() or None

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "*").split(",")
    if o.strip()
]

RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
AUTH_RATE_LIMIT = os.getenv("AUTH_RATE_LIMIT", "5/minute")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Client side
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
CLIENT_STATE_PATH = os.path.expanduser(
    os.getenv("CLIENT_STATE_PATH", "~/.ideabank/session.json")
)
