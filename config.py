import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./buildinghub.db")
    CREATE_TABLES = bool(data.get("CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ACCESS_TOKEN_MINUTES = int(data.get("ACCESS_TOKEN_MINUTES", 15))
    REFRESH_TOKEN_DAYS = int(data.get("REFRESH_TOKEN_DAYS", 30))
    # Roles open to self-registration; unset means roles without capabilities
    REGISTRATION_ROLES = data.get("REGISTRATION_ROLES")

    # Client side
    API_BASE_URL = data.get("API_BASE_URL", "http://localhost:8000")
    HTTP_TIMEOUT = float(data.get("HTTP_TIMEOUT", 10.0))
    SESSION_FILE = data.get(
        "SESSION_FILE", os.path.join(os.path.expanduser("~"), ".buildinghub", "session.yaml")
    )
