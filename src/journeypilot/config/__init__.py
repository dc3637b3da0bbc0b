"""Configuration loading exports."""

from journeypilot.config.loader import build_catalog, load_config

__all__ = ["build_catalog", "load_config"]
