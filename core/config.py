"""Application settings loaded from the environment.

Values come from process environment variables, optionally populated from
a `.env` file in the project root.
"""

import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Read/Write partitioning: point READ_DATABASE_URL at a replica in production.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///fitness.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)

SEED_DATA = os.getenv("SEED_DATA", "True").lower() == "true"

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", os.path.join(BASE_DIR, "logs"))
