import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    app_env: str = "development"
    root_path: str = ""
    log_level: str = "INFO"
    title: str = "Appointment Scheduler"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def is_test(self) -> bool:
        return self.app_env == "test"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            app_env=os.getenv("APP_ENV", "development").lower(),
            root_path=os.getenv("ROOT_PATH", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            title=os.getenv("APP_TITLE", "Appointment Scheduler"),
            cors_allow_origins=_split_origins(
                os.getenv("CORS_ALLOW_ORIGINS", "*")
            ),
        )
