"""
Marketplace Relational Navigator
Centralized Configuration Management

Pydantic settings with environment variable and .env support.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NavigatorSettings(BaseSettings):
    """Snapshot sources and display conventions"""
    
    model_config = SettingsConfigDict(env_prefix="NAVIGATOR_")
    
    snapshot_path: str = Field(default="./data/sample-data.json", description="Snapshot JSON file")
    diagram_path: str = Field(
        default="./mermaid/marketplace-erd-updated.mermaid",
        description="Mermaid diagram source file",
    )
    encoding: str = Field(default="utf-8", description="Encoding of source files")
    category_separator: str = Field(default=" › ", description="Separator between category path segments")
    currency_symbol: str = Field(default="$", description="Currency prefix for discount amounts")


class MonitoringSettings(BaseSettings):
    """Logging Configuration"""
    
    model_config = SettingsConfigDict(env_prefix="")
    
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format: json or text")
    log_file: Optional[str] = Field(default=None, description="Log file path")


class Settings(BaseSettings):
    """
    Main Application Settings
    
    Aggregates all configuration sections and provides a single entry point
    for accessing application configuration.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Application
    app_name: str = Field(default="marketplace-navigator", description="Application name")
    app_env: str = Field(default="development", description="Environment")
    debug: bool = Field(default=False, description="Debug mode")
    
    # API Server
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    
    version: str = Field(default="1.0.0", description="Application version")
    
    navigator: NavigatorSettings = Field(default_factory=NavigatorSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)
    
    @field_validator("app_env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment value"""
        allowed = ["development", "staging", "production", "testing"]
        if v.lower() not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v.lower()
    
    @property
    def is_production(self) -> bool:
        """Check if running in production"""
        return self.app_env == "production"
    
    @property
    def is_development(self) -> bool:
        """Check if running in development"""
        return self.app_env == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.
    
    Returns:
        Settings: Application settings instance
    """
    return Settings()
