from entrypoint_locator.config.config_manager import (
    Configuration,
    ConfigurationError,
    load_config,
    load_config_from_env,
    resolve_kotlin_home,
)

__all__ = [
    "Configuration",
    "ConfigurationError",
    "load_config",
    "load_config_from_env",
    "resolve_kotlin_home",
]
