"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from:
  1. YAML config file (if specified)
  2. Environment variables (INDEXBRIDGE_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from indexbridge.adapters.base.exceptions import ConfigurationError


class EngineSettings(BaseModel):
    """Connection settings for the search engine client."""

    hosts: list[str] = Field(default_factory=lambda: ["http://localhost:9200"], description="Engine node URLs")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    verify_certs: bool = Field(default=True, description="Whether to verify TLS certificates")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    extra: dict[str, Any] = Field(default_factory=dict, description="Additional client keyword arguments")

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var) or list."""
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            # Single host as plain string
            return [v] if v else []
        return list(v)


class SearchSettings(BaseModel):
    """Query translation and index naming behaviour."""

    default_page_size: int = Field(default=10, ge=1, description="Result window size when a query sets no limit")
    index_prefix: str = Field(default="", description="Prefix applied to every index name sent to the engine")
    full_text: bool = Field(default=True, description="Wire the free-text term into a multi_match clause")
    search_fields: list[str] = Field(
        default_factory=list,
        description="Fields searched by the free-text clause (empty = all fields)",
    )


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the INDEXBRIDGE_ prefix.
    Nested settings use double underscores: INDEXBRIDGE_SEARCH__INDEX_PREFIX=staging

    Example:
        INDEXBRIDGE_ENGINE__HOSTS='["https://search-1:9200", "https://search-2:9200"]'
        INDEXBRIDGE_ENGINE__USERNAME=admin
        INDEXBRIDGE_SEARCH__DEFAULT_PAGE_SIZE=25
    """

    model_config = {
        "env_prefix": "INDEXBRIDGE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    engine: EngineSettings = Field(default_factory=EngineSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Sections present in the YAML file are passed as init values; sections
        it omits still fall back to environment variables and defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file does not hold a mapping.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {config_path}")

        return cls(**data)
