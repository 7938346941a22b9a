from whyinstalled.core.config.loader import ConfigError, Settings, resolve_settings

__all__ = ["ConfigError", "Settings", "resolve_settings"]
