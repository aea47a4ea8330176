from typing import ClassVar, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    GROQ_API_KEY: Optional[str] = Field(default=None)

    # LLM Configuration
    LLM_MODEL_NAME: str = Field(default="moonshotai/kimi-k2-instruct", description="Groq model used for verdicts")
    LLM_TEMPERATURE: float = Field(default=0.2, description="Sampling temperature for verdict generation")
    LLM_USE_RESPONSE_SCHEMA: bool = Field(
        default=True, description="Request schema-guided JSON output for verdict generation"
    )

    # Network timeouts (seconds)
    SEARCH_TIMEOUT_SECONDS: float = Field(default=10.0, description="Timeout for a single search engine request")
    PAGE_FETCH_TIMEOUT_SECONDS: float = Field(default=15.0, description="Timeout for a single page fetch")
    MODEL_RACE_TIMEOUT_SECONDS: float = Field(
        default=12.0, description="Outer timeout raced against model calls made without evidence"
    )
    HTTP_VERIFY_TLS: bool = Field(
        default=False, description="Verify TLS certificates of search surfaces and scraped pages"
    )

    # Evidence pipeline
    SEARCH_MAX_RESULTS: int = Field(default=5, description="Maximum aggregated search results per statement")
    CONTENT_FETCH_LIMIT: int = Field(default=3, description="Number of aggregated results whose pages are fetched")
    CONTENT_MAX_CHARS: int = Field(default=2000, description="Maximum characters of extracted page content")
    EVIDENCE_FRESHNESS_POLICY: Literal["keep_all", "dated_only"] = Field(
        default="keep_all",
        description="'keep_all' keeps every fetched page; 'dated_only' keeps dated pages sorted newest first",
    )

    LOG_LEVEL: str = Field(default="INFO", description="Root log level for factcheck loggers")

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
