import os
import socket
import logging
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List

# Files layered over the environment, most specific last
ENV_FILES = (".env", f".env.{os.getenv('ENVIRONMENT', 'development').lower()}")

##############################################################################
# Settings Classes
##############################################################################

class LoggingSettings(BaseSettings):
    LEVEL: str = Field("INFO", description="Logging level")
    FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=ENV_FILES, extra="ignore")

class AzureStorageSettings(BaseSettings):
    CONNECTION_STRING: Optional[str] = Field(
        # Default to local Azurite connection string in development
        "DefaultEndpointsProtocol=http;AccountName=devstoreaccount1;AccountKey=Eby8vdM02xNOcqFlqUwJPLlmEtlCDXJ1OUzFT50uSRZ6IFsuFq2UVErCz4I6tq/K1SZFPTOtr/KBHBeksoGMGw==;TableEndpoint=http://127.0.0.1:10002/devstoreaccount1;"
        if os.getenv('ENVIRONMENT', 'development') == 'development' else None,
        description="Azure Storage connection string"
    )
    # Declared before ACCOUNT_URL so its validator can see it
    USE_MANAGED_IDENTITY: bool = Field(
        False,
        description="Whether to use Azure Managed Identity"
    )
    ACCOUNT_URL: Optional[str] = Field(
        None,
        description="Azure Storage account URL for managed identity",
        validate_default=True
    )
    TABLE_NAME: str = Field("Users", description="Table holding user records")

    @field_validator("ACCOUNT_URL")
    def validate_account_url(cls, v, info):
        values = info.data
        if values.get("USE_MANAGED_IDENTITY") and not v:
            raise ValueError("AZURE_STORAGE_ACCOUNT_URL must be provided when USE_MANAGED_IDENTITY is enabled")
        return v

    model_config = SettingsConfigDict(env_prefix="AZURE_STORAGE_", env_file=ENV_FILES, extra="ignore")

class APISettings(BaseSettings):
    CORS_ORIGINS: List[str] = Field(
        ["http://localhost:3000"], # Default for development
        description="List of allowed CORS origins"
    )

    @field_validator('CORS_ORIGINS')
    def validate_cors_origins(cls, v):
        env = os.getenv('ENVIRONMENT', 'development')
        if env == 'production' and '*' in v:
            raise ValueError("Wildcard CORS origin '*' is not allowed in production")
        return v

    model_config = SettingsConfigDict(env_prefix="API_", env_file=ENV_FILES, extra="ignore")

class AppSettings(BaseSettings):
    ENVIRONMENT: str = Field("development", description="Application environment")
    PORT: int = Field(8080, description="Application port")
    DEBUG: bool = Field(False, description="Debug mode")
    PROJECT_NAME: str = Field("User CRUD API", description="Project name")
    VERSION: str = Field("1.0.0", description="API version")
    STORAGE_BACKEND: str = Field("azure", description="User store backend: azure or memory")

    # Sub-settings
    AZURE: AzureStorageSettings = Field(default_factory=AzureStorageSettings)
    LOGGING: LoggingSettings = Field(default_factory=LoggingSettings)
    API: APISettings = Field(default_factory=APISettings)

    # Host information for diagnostics
    HOST_NAME: str = Field(default_factory=socket.gethostname)

    @field_validator("ENVIRONMENT")
    def validate_environment(cls, v):
        allowed_environments = ["development", "staging", "production", "test"]
        if v not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v

    @field_validator("STORAGE_BACKEND")
    def validate_storage_backend(cls, v):
        allowed_backends = ["azure", "memory"]
        if v not in allowed_backends:
            raise ValueError(f"Storage backend must be one of {allowed_backends}")
        return v

    model_config = SettingsConfigDict(
        env_file=ENV_FILES,
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Allow and ignore extra fields
    )

settings = AppSettings()

logger = logging.getLogger(__name__)

# Verify critical settings
def verify_required_settings(app_settings: Optional[AppSettings] = None):
    """Verify that all required settings are present and valid at startup"""
    app_settings = app_settings or settings
    critical_errors = []
    warnings = []

    # Check Azure Storage settings
    if app_settings.STORAGE_BACKEND == "azure":
        azure = app_settings.AZURE
        if not azure.USE_MANAGED_IDENTITY and not azure.CONNECTION_STRING:
            critical_errors.append(
                "Either AZURE_STORAGE_CONNECTION_STRING must be provided or AZURE_STORAGE_USE_MANAGED_IDENTITY must be enabled"
            )
    elif app_settings.ENVIRONMENT == "production":
        warnings.append("In-memory user store is configured in production; data will not survive a restart")

    # Check API settings
    if app_settings.ENVIRONMENT == "production" and "*" in app_settings.API.CORS_ORIGINS:
        warnings.append("CORS is configured to allow all origins (*) in production environment")

    # Log warnings
    for warning in warnings:
        logger.warning(f"Configuration warning: {warning}")

    # Exit on critical errors
    if critical_errors:
        for error in critical_errors:
            logger.error(f"Configuration error: {error}")
        logger.error("Application startup failed due to configuration errors")
        import sys
        sys.exit(1)
