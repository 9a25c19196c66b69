import os
import yaml
from typing import Optional, Tuple
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field
from margin_engine.core.exceptions import ConfigurationError


class SystemConfig(BaseModel):
    enable_logging: bool = True
    log_level: str = "INFO"
    # 为空则只输出到控制台
    log_file: Optional[str] = None


class KeysConfig(BaseModel):
    api_key: Optional[str] = None
    secret_key: Optional[str] = None


class UrlsConfig(BaseModel):
    base_url: str = "https://api.binance.com"


class MarginConfig(BaseModel):
    recv_window: int = Field(5000, gt=0, le=60000, description="毫秒")
    timeout: Optional[int] = Field(None, gt=0, description="HTTP 超时 (秒), 交给 transport 处理")


class Settings(BaseSettings):
    system: SystemConfig = SystemConfig()
    keys: KeysConfig = KeysConfig()
    urls: UrlsConfig = UrlsConfig()
    margin: MarginConfig = MarginConfig()

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", extra="ignore"
    )

    @classmethod
    def load_from_yaml(cls, path: str = None) -> "Settings":
        if path is None:
            # Default to margin_engine/core/config.yaml
            path = os.path.join(os.path.dirname(__file__), "config.yaml")

        if not os.path.exists(path):
            return cls()

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def get_api_keys(self) -> Tuple[str, str]:
        """
        Get the margin account API key pair.
        """
        api_key = self.keys.api_key
        secret_key = self.keys.secret_key

        if not api_key or not secret_key:
            raise ConfigurationError("API keys are missing in configuration")

        return api_key, secret_key


# Singleton instance
settings = Settings.load_from_yaml()
