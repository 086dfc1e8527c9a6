from functools import lru_cache
from typing import Optional
import os

from pydantic_settings import BaseSettings

QIANFAN_CHAT_URL = "https://qianfan.baidubce.com/v2/chat/completions"


class Settings(BaseSettings):
    BAIDU_API_KEY: Optional[str] = None
    BAIDU_APP_ID: Optional[str] = None
    QIANFAN_API_URL: str = QIANFAN_CHAT_URL
    QIANFAN_MODEL: Optional[str] = None  # provider default when unset

    TEMPERATURE: float = 0.3
    MAX_TOKENS: int = 2000
    REQUEST_TIMEOUT: float = 25.0  # seconds, under the 26s serverless limit

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @property
    def has_api_key(self) -> bool:
        return bool(self.BAIDU_API_KEY)

    @property
    def has_app_id(self) -> bool:
        return bool(self.BAIDU_APP_ID)

    @property
    def is_configured(self) -> bool:
        return self.has_api_key and self.has_app_id


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(_env_file=os.getenv("ENV_FILE", ".env"), _env_file_encoding="utf-8")
