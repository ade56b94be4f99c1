from os import getenv
from dotenv import load_dotenv


DEFAULT_API_BASE_URL = "https://discord.com/api/v10"
DEFAULT_REQUEST_TIMEOUT = 10
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    pass


def load_config(env_file: str = ".env"):
    load_dotenv(env_file)

    timeout = getenv("REQUEST_TIMEOUT") or DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(timeout)
    except ValueError:
        raise ConfigError(f"REQUEST_TIMEOUT must be a number of seconds (got `{timeout}`)")
    if timeout <= 0:
        raise ConfigError("REQUEST_TIMEOUT must be greater than zero")

    log_level = (getenv("LOG_LEVEL") or "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)} (got `{log_level}`)")

    return {
        "token": getenv("TOKEN"),
        "api_base_url": (getenv("API_BASE_URL") or DEFAULT_API_BASE_URL).rstrip("/"),
        "request_timeout": timeout,
        "log_level": log_level,
    }


def require_token(config: dict):
    if not config.get("token"):
        raise ConfigError("TOKEN is not set (add it to .env or the environment)")
    return config["token"]
