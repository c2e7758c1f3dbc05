#!/usr/bin/env python3
"""
Environment Configuration Generator for the User CRUD API

Writes .env.<environment> from the .env.example template, applying the
overrides each environment needs.
"""

import os
import sys
import argparse
from datetime import datetime
from typing import Dict, Optional

from dotenv import dotenv_values

ENV_EXAMPLE_FILE = ".env.example"
AVAILABLE_ENVIRONMENTS = ["development", "staging", "production", "test"]

# Environment-specific default overrides
ENV_DEFAULTS = {
    "development": {
        "DEBUG": "true",
        "API_CORS_ORIGINS": '["http://localhost:3000"]',
        "STORAGE_BACKEND": "azure",
        "LOG_LEVEL": "DEBUG",
    },
    "staging": {
        "DEBUG": "false",
        "API_CORS_ORIGINS": '["https://staging.yourappdomain.com"]',
    },
    "production": {
        "DEBUG": "false",
        "API_CORS_ORIGINS": '["https://yourappdomain.com"]',
        "LOG_LEVEL": "INFO",
    },
    "test": {
        "DEBUG": "true",
        "API_CORS_ORIGINS": '["*"]',
        "STORAGE_BACKEND": "memory",
        "LOG_LEVEL": "DEBUG",
    }
}

def build_env(environment: str, template: Dict[str, Optional[str]]) -> Dict[str, str]:
    """Merge the template with the overrides for ``environment``"""
    env_vars = {key: value or "" for key, value in template.items()}
    env_vars.update(ENV_DEFAULTS.get(environment, {}))
    env_vars["ENVIRONMENT"] = environment
    return env_vars

def render_env(output_file: str, env_vars: Dict[str, str]) -> str:
    lines = [
        f"# Generated configuration for {os.path.basename(output_file)}",
        f"# Generated on: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        "",
    ]
    lines.extend(f"{key}={value}" for key, value in env_vars.items())
    return "\n".join(lines) + "\n"

def generate_env_file(environment: str, output_file: Optional[str] = None, force: bool = False) -> str:
    """Generate an environment-specific configuration file and return its path"""
    output_file = output_file or f".env.{environment}"

    if not os.path.exists(ENV_EXAMPLE_FILE):
        print(f"Error: Example environment file '{ENV_EXAMPLE_FILE}' not found")
        print("Make sure you're running this script from the project root")
        sys.exit(1)

    if os.path.exists(output_file) and not force:
        response = input(f"File '{output_file}' already exists. Overwrite? (y/N): ")
        if response.lower() != 'y':
            print("Operation cancelled")
            sys.exit(0)

    env_vars = build_env(environment, dotenv_values(ENV_EXAMPLE_FILE))
    with open(output_file, "w") as f:
        f.write(render_env(output_file, env_vars))

    print(f"Successfully wrote configuration to {output_file}")
    return output_file

def main():
    """Main entry point for the script"""
    parser = argparse.ArgumentParser(
        description="Generate environment-specific configuration files"
    )
    parser.add_argument(
        "environment",
        choices=AVAILABLE_ENVIRONMENTS,
        help="Target environment to generate configuration for"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path (default: .env.<environment>)",
        default=None
    )
    parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite an existing output file without asking"
    )

    args = parser.parse_args()
    generate_env_file(args.environment, args.output, args.force)

if __name__ == "__main__":
    main()
