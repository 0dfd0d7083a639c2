"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from .settings import Settings, Environment, parse_environment

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT or defaults to development

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT") or "development"

        env = parse_environment(environment)
        env_file = Path(f".env.{env.value}")

        if env_file.exists():
            return Settings(_env_file=str(env_file), environment=env)

        logger.warning(f"Environment file {env_file} not found, using default settings")
        return Settings(environment=env)

    @staticmethod
    def get_available_environments() -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(".").glob(".env.*"):
            env_name = env_file.name.replace(".env.", "")
            if env_name in {e.value for e in Environment}:
                env_files.append(env_name)
        return sorted(env_files)

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Validate that an environment configuration exists and loads.

        Args:
            environment: Environment name to validate

        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            env = parse_environment(environment)
            if not Path(f".env.{env.value}").exists():
                return False

            settings = ConfigLoader.load_environment_config(env.value)
            required_settings = [
                settings.app_name,
                settings.database_url,
                settings.host,
                settings.port,
            ]
            return all(setting is not None for setting in required_settings)

        except ValueError:
            return False


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
