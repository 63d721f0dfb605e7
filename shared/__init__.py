"""
Tabula Shared Module
====================

Common utilities and configuration management shared across Tabula
modules: TOML configuration, structured logging and the Rich console.
"""

from shared.config import TabulaConfig, get_config

__all__ = ["TabulaConfig", "get_config"]
