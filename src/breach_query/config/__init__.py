"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - BreachQueryConfig: Root configuration object
    - HttpConfig: Server, endpoint, timeout, user agent
    - LoaderConfig: Schema validation and date coercion switches

Profiles live under config/profiles/<name>.yaml and are deep-merged on
top of the base file (e.g. "hibp" to query haveibeenpwned.com directly).
"""

from breach_query.config.loader import ConfigLoader, load_config
from breach_query.config.models import BreachQueryConfig, HttpConfig, LoaderConfig

__all__ = [
    "ConfigLoader",
    "load_config",
    "BreachQueryConfig",
    "HttpConfig",
    "LoaderConfig",
]
