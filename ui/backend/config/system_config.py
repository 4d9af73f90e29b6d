"""
System configuration for the FAQ chatbot backend.
Contains API settings for the HTTP layer.
"""

import os
from typing import List
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API-related configuration settings."""
    prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8080

    # Cross-origin settings; the requesting origin is echoed back when it matches
    cors_origin_regex: str = ".*"
    cors_allow_credentials: bool = True
    cors_methods: List[str] = field(default_factory=lambda: ["POST", "GET", "OPTIONS", "DELETE"])
    cors_headers: List[str] = field(
        default_factory=lambda: ["Content-Type", "Accept", "X-Requested-With", "remember-me"]
    )
    cors_max_age: int = 3600

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Create API config from environment variables."""
        defaults = cls()
        return cls(
            prefix=os.getenv('API_PREFIX', defaults.prefix),
            host=os.getenv('API_HOST', defaults.host),
            port=int(os.getenv('API_PORT', defaults.port)),
            cors_origin_regex=os.getenv('API_CORS_ORIGIN_REGEX', defaults.cors_origin_regex),
            cors_allow_credentials=os.getenv('API_CORS_ALLOW_CREDENTIALS', 'true').lower() == 'true',
            cors_max_age=int(os.getenv('API_CORS_MAX_AGE', defaults.cors_max_age)),
        )


@dataclass
class LoggingConfig:
    """Logging settings for the backend process."""
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """Create logging config from environment variables."""
        return cls(
            level=os.getenv('LOG_LEVEL', cls.level).upper(),
            format=os.getenv('LOG_FORMAT', cls.format),
        )


@dataclass
class SystemConfig:
    """Main system configuration container."""
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'SystemConfig':
        """Create system config from environment variables."""
        return cls(
            api=APIConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )


# Global configuration instance
config = SystemConfig.from_env()
