import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = "2345"

HOST = os.getenv("HTTPECHO_HOST", "0.0.0.0")
PORT = os.getenv("HTTPECHO_PORT", DEFAULT_PORT)
LOG_LEVEL = os.getenv("HTTPECHO_LOG_LEVEL", "INFO").upper()
