import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_path: str = "logs/wishdraw.log"
    draw_max_attempts: int = 1000


def load_settings() -> Settings:
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_path = os.getenv("LOG_PATH", "logs/wishdraw.log")
    raw_attempts = os.getenv("DRAW_MAX_ATTEMPTS", "1000")

    try:
        draw_max_attempts = int(raw_attempts)
    except ValueError:
        raise ValueError("DRAW_MAX_ATTEMPTS must be an integer.") from None
    if draw_max_attempts < 1:
        raise ValueError("DRAW_MAX_ATTEMPTS must be a positive integer.")

    return Settings(
        log_level=log_level.upper(),
        log_path=log_path,
        draw_max_attempts=draw_max_attempts,
    )
