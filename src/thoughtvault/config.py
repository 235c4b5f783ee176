from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    OPENAI_API_KEY: SecretStr | None = Field(None, description="OpenAI API Key")
    OPENAI_MODEL_SUMMARY: str = Field(
        "gpt-4o-mini",
        description="Model used to summarize transcripts into thought assets"
    )
    OPENAI_MAX_OUTPUT_TOKENS: int = Field(
        8192,
        description="Upper bound on tokens in the summary reply"
    )
    LLM_TIMEOUT_SECONDS: float = Field(
        60.0,
        description="Timeout for a single summarization request"
    )
    DATA_DIR: Path = Field(
        Path("data"),
        description="Directory holding the local database"
    )
    ASSET_DIR: Optional[Path] = Field(
        None,
        description="Folder where thought assets are written as Markdown files"
    )
    FREE_USAGE_LIMIT: int = Field(
        999,
        description="Number of summaries a user may run before hitting the limit"
    )

# Singleton instance
settings = Settings()
