"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class StudentAccountsConfig(BaseSettings):
    """Student accounts system configuration"""

    # Business rules configuration
    initial_balance: str = "1000.00"  # Balance every new ledger starts with

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8090

    class Config:
        env_prefix = "STUDENT_ACCOUNTS_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = StudentAccountsConfig()


def get_config() -> StudentAccountsConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> StudentAccountsConfig:
    """Reload configuration from environment"""
    global config
    config = StudentAccountsConfig()
    return config
