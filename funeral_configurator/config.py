from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "funeral-configurator"
    LOG_LEVEL: str = "INFO"

    # Pricing, amounts in yen
    COVERAGE_CEILING: int = 2_000_000

    # Layout
    DEFAULT_LAYOUT_SEED: int = 0
    MIN_FLOWER_COUNT: int = 200

    # Sessions
    MAX_SESSIONS: int = 1000

    # Capability signals for server-side detection (all optional)
    DEVICE_MEMORY_GB: Optional[float] = None
    GRAPHICS_RENDERER: Optional[str] = None
    SMALL_VIEWPORT: Optional[bool] = None

    class Config:
        env_file = ".env"


settings = Settings()
