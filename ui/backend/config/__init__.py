"""
Configuration package for the FAQ chatbot backend.
"""

from .system_config import config, SystemConfig, APIConfig, LoggingConfig

__all__ = [
    'config',
    'SystemConfig',
    'APIConfig',
    'LoggingConfig'
]
