import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./pocketledger.db")
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = "HS256"
JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "7"))

PORT = int(os.getenv("PORT", "3000"))
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "http://localhost:5173")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")  # optional, stream only when unset

SEED_DEMO_USER = os.getenv("SEED_DEMO_USER", "false").lower() in ("1", "true", "yes")

if not JWT_SECRET:
    raise RuntimeError("Invalid environment variables: JWT_SECRET is required")
