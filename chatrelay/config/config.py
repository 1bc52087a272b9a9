import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

logger = logging.getLogger(__name__)

# Completion provider (any OpenAI-compatible endpoint, Groq by default)
LLM_API_KEY = os.getenv("GROQ_API_KEY", "")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
MODEL = os.getenv("MODEL", "llama-3.1-8b-instant")
TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.6"))
MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "512"))

# Relay server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Chat client
CHAT_API_URL = os.getenv("CHAT_API_URL", "http://localhost:5000")


def warn_if_unconfigured() -> None:
    if not LLM_API_KEY:
        logger.warning("GROQ_API_KEY is not set. Chat requests will fail.")
