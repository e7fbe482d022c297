import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


CREDENTIAL_URL = os.getenv("CREDENTIAL_URL", "")   # JSON document: {"apiKey": "..."}

OPENAI_ENDPOINT = os.getenv("OPENAI_ENDPOINT", "https://api.openai.com/v1/chat/completions")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_MAX_TOKENS = int(os.getenv("OPENAI_MAX_TOKENS", "50"))
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.3"))

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))   # seconds
JPEG_QUALITY = int(os.getenv("JPEG_QUALITY", "80"))

DATA_DIR = os.getenv("DATA_DIR", "data")
UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")

PREMIUM_UNLOCKED = _env_bool("PREMIUM_UNLOCKED")
FREE_BREED_LIMIT = int(os.getenv("FREE_BREED_LIMIT", "3"))
FREE_ARTICLE_LIMIT = int(os.getenv("FREE_ARTICLE_LIMIT", "3"))
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
