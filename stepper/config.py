from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Matching Configuration
    # Jaccard similarity above which two step texts count as the same work
    STEP_SIMILARITY_THRESHOLD: float = 0.6

    # Retrieval Configuration
    SEARCH_RESULT_LIMIT: int = 3
    LOW_CONFIDENCE_THRESHOLD: int = 9

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
