import os
from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Load environment variables from the project root
load_dotenv(dotenv_path=os.path.join(PROJECT_ROOT, ".env"))


def _bool_env(name: str, default: str = "1") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value not in {"0", "false", "no"}


APP_NAME = os.getenv("APP_NAME", "Usuarios y productos API")
APP_ENV = os.getenv("APP_ENV", "development").lower()
IS_DEV_MODE = APP_ENV in {"dev", "development"}

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Access log in the "tiny" format; on by default while developing
REQUEST_LOGGING = _bool_env("REQUEST_LOGGING", "1" if IS_DEV_MODE else "0")

STATIC_DIR = os.getenv("STATIC_DIR", os.path.join(PROJECT_ROOT, "public"))
GREETING = os.getenv("GREETING", "Hola mundo desde FastAPI!")
