"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- Linkup (listing provider) ----------------------------------------
    linkup_api_key: str = field(default_factory=lambda: os.getenv("LINKUP_API_KEY", ""))
    linkup_base_url: str = field(
        default_factory=lambda: os.getenv("LINKUP_BASE_URL", "https://api.linkup.so/v1")
    )
    search_depth: str = field(default_factory=lambda: os.getenv("LINKUP_SEARCH_DEPTH", "deep"))
    search_timeout: float = field(
        default_factory=lambda: float(os.getenv("LINKUP_TIMEOUT", "10.0"))
    )

    # --- OpenAI (summarizer) ----------------------------------------------
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    openai_base_url: str = field(default_factory=lambda: os.getenv("OPENAI_BASE_URL", ""))
    summary_model: str = field(
        default_factory=lambda: os.getenv("OPENAI_SUMMARY_MODEL", "gpt-3.5-turbo")
    )
    summary_max_tokens: int = field(
        default_factory=lambda: int(os.getenv("SUMMARY_MAX_TOKENS", "200"))
    )
    summary_temperature: float = field(
        default_factory=lambda: float(os.getenv("SUMMARY_TEMPERATURE", "0.3"))
    )
    summary_timeout: float = field(
        default_factory=lambda: float(os.getenv("OPENAI_TIMEOUT", "15.0"))
    )

    # --- Guardrails --------------------------------------------------------
    max_query_length: int = field(
        default_factory=lambda: int(os.getenv("MAX_QUERY_LENGTH", "500"))
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", "logs/homesearch.log"))

    # --- HTTP server -------------------------------------------------------
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


@dataclass(frozen=True)
class Capabilities:
    """Which outbound providers the pipeline is allowed to use.

    Built once and handed to ``SearchPipeline`` so the branches that depend on
    credential presence never read the environment mid-request.
    """

    has_listing_credential: bool
    has_summary_credential: bool

    @classmethod
    def from_settings(cls, cfg: "Settings") -> "Capabilities":
        return cls(
            has_listing_credential=bool(cfg.linkup_api_key.strip()),
            has_summary_credential=bool(cfg.openai_api_key.strip()),
        )


# Module-level singleton -- import this everywhere.
settings = Settings()
