"""
Configuration management for the zone border service.
"""

import os


class Config:
    """Configuration for the zone border service"""

    def __init__(self):
        # Server configuration
        self.host = os.getenv("ZONE_BORDER_SERVICE_HOST", "0.0.0.0")
        self.port = int(os.getenv("ZONE_BORDER_SERVICE_PORT", "8082"))
        self.environment = os.getenv("ENVIRONMENT", "development")

        # Generation configuration
        self.default_spacing = float(os.getenv("DEFAULT_BORDER_SPACING", "1.0"))  # world units

        # Logging configuration
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()


def load_config() -> Config:
    """Load configuration from environment variables"""
    return Config()
