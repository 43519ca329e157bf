import os
from typing import Literal
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()


class OnboardingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    store_backend: Literal["file", "memory", "postgres"] = "file"
    store_path: str = Field(default="employees.json", description="JSON file for the file backend")
    store_key: str = Field(default="employees", description="Slot holding the employee list")
    submit_delay_seconds: float = Field(default=1.5, ge=0)
    success_display_seconds: float = Field(default=5.0, ge=0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "OnboardingSettings":
        env = {
            "store_backend": os.getenv("STORE_BACKEND"),
            "store_path": os.getenv("STORE_PATH"),
            "store_key": os.getenv("STORE_KEY"),
            "submit_delay_seconds": os.getenv("SUBMIT_DELAY_SECONDS"),
            "success_display_seconds": os.getenv("SUCCESS_DISPLAY_SECONDS"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in env.items() if v is not None})
