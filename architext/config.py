"""Application configuration via environment variables."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite+aiosqlite:///{BASE_DIR / 'architext.db'}")

# JSONL export
EXPORT_DIR = Path(os.getenv("EXPORT_DIR", str(BASE_DIR / "exports")))
EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", "apartments.jsonl")

# Minimum shared wall length for two rooms to be reported as adjacent
ADJACENCY_TOLERANCE = float(os.getenv("ADJACENCY_TOLERANCE", "0.05"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
