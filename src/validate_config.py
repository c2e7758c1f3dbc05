#!/usr/bin/env python3
"""
Configuration validation script for the User CRUD API

This script validates the configuration settings from environment variables
and .env files to ensure the application will start correctly.
"""

import sys
import os
from pprint import pprint
from typing import Dict, Any, List, Tuple

# Add the parent directory to the path so we can import the settings class
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError

from src.config.settings import AppSettings, verify_required_settings

def check_config() -> Tuple[bool, List[str], Dict[str, Any]]:
    """
    Check the configuration and return a tuple of:
    (is_valid, warnings, config_values)
    """
    warnings = []
    errors = []

    try:
        settings = AppSettings()
    except ValidationError as e:
        return False, [f"Failed to load configuration: {str(e)}"], {}

    try:
        verify_required_settings(settings)
        is_valid = True
    except SystemExit:
        is_valid = False
        errors.append("Critical configuration errors found.")

    if settings.ENVIRONMENT == "production":
        if settings.DEBUG:
            warnings.append("DEBUG mode is enabled in production environment")
        if settings.STORAGE_BACKEND == "memory":
            warnings.append("In-memory user store is configured in production environment")

    # Sanitized view of the current configuration
    config_values = {
        "ENVIRONMENT": settings.ENVIRONMENT,
        "HOST_NAME": settings.HOST_NAME,
        "PORT": settings.PORT,
        "DEBUG": settings.DEBUG,
        "PROJECT_NAME": settings.PROJECT_NAME,
        "VERSION": settings.VERSION,
        "STORAGE_BACKEND": settings.STORAGE_BACKEND,
        "LOGGING": {
            "LEVEL": settings.LOGGING.LEVEL,
            "FORMAT": "<format string>",
        },
        "AZURE": {
            "USE_MANAGED_IDENTITY": settings.AZURE.USE_MANAGED_IDENTITY,
            "ACCOUNT_URL": settings.AZURE.ACCOUNT_URL,
            "CONNECTION_STRING": "<hidden>" if settings.AZURE.CONNECTION_STRING else None,
            "TABLE_NAME": settings.AZURE.TABLE_NAME,
        },
        "API": {
            "CORS_ORIGINS": settings.API.CORS_ORIGINS,
        }
    }

    return is_valid, warnings + errors, config_values

def main():
    """Main entry point for the script"""
    print("User CRUD API Configuration Validator")
    print("=" * 50)

    is_valid, messages, config = check_config()

    if messages:
        print("\nMessages:")
        for message in messages:
            print(f"  - {message}")

    print("\nCurrent Configuration:")
    pprint(config, indent=2, width=100)

    print("\nValidation Result:", "PASSED" if is_valid else "FAILED")

    sys.exit(0 if is_valid else 1)

if __name__ == "__main__":
    main()
