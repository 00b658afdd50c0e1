import os
from dotenv import load_dotenv

load_dotenv()


def _get(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _float(key: str, default: float = 0.0) -> float:
    return float(_get(key, str(default)))


def _bool(key: str, default: bool = False) -> bool:
    return _get(key, str(default)).lower() in ("1", "true", "yes")


class RunnerSettings:
    base_url: str = _get("HTTPSPEC_BASE_URL", "http://testserver")
    timeout: float = _float("HTTPSPEC_TIMEOUT", 10.0)
    log_bodies: bool = _bool("HTTPSPEC_LOG_BODIES", False)


class Settings:
    runner = RunnerSettings()


settings = Settings()
