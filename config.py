# config.py
# All runtime settings come from environment variables, optionally seeded from a .env file.
# Values are read on every call so tests and entry points can change them.

import logging
import os

from dotenv import load_dotenv


def load_env_file(path: str = None) -> bool:
    """Load KEY=VALUE pairs from `path` (default: .env lookup). Real env vars win."""
    return load_dotenv(path, override=False)


load_env_file()


def db_config() -> dict:
    return {
        "host": os.environ.get("DB_HOST", "localhost"),
        "user": os.environ.get("DB_USER"),
        "password": os.environ.get("DB_PASSWORD"),
        "database": os.environ.get("DB_NAME", "expenses_db"),
        "port": int(os.environ.get("DB_PORT", 3306)),
        "ssl_disabled": os.environ.get("DB_SSL_DISABLED", "0").lower() in ("1", "true", "yes"),
        "connection_timeout": 10,
    }


def db_pool_size() -> int:
    return int(os.environ.get("DB_POOL_SIZE", 5))


def llm_config() -> dict:
    return {
        "api_base": os.environ.get("LLM_API_BASE", "http://localhost:8000/v1"),
        "api_key": os.environ.get("LLM_API_KEY"),
        "model": os.environ.get("LLM_MODEL", "qwen-2.5-32b"),
        "timeout": int(os.environ.get("LLM_TIMEOUT", 60)),
        "temperature": float(os.environ.get("LLM_TEMPERATURE", 0.0)),
        "max_tokens": int(os.environ.get("LLM_MAX_TOKENS", 1024)),
    }


def llm_backend() -> str:
    return os.environ.get("LLM_BACKEND", "http").lower()


def local_model_name() -> str:
    return os.environ.get("LOCAL_MODEL_NAME", "Qwen/Qwen2.5-0.5B-Instruct")


def schema_sample_rows() -> int:
    return int(os.environ.get("SCHEMA_SAMPLE_ROWS", 3))


def schema_file():
    return os.environ.get("SCHEMA_FILE") or None


def max_rows() -> int:
    return int(os.environ.get("MAX_ROWS", 1000))


def setup_logging(level: str = None):
    logging.basicConfig(
        level=(level or os.environ.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
