"""Configuration package."""

from indexbridge.config.settings import EngineSettings, ObservabilitySettings, SearchSettings, Settings

__all__ = ["EngineSettings", "ObservabilitySettings", "SearchSettings", "Settings"]
