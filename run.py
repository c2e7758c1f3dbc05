#!/usr/bin/env python3
"""
Helper script for running and managing the User CRUD API.
Usage:
    python run.py [command]

Commands:
    start           Start the API server
    dev             Start the development server with auto-reload
    test            Run the test suite
    validate-config Validate the current configuration
    create-tables   Initialize the user table
    clean           Clean up temporary files and caches
"""

import os
import sys
import subprocess
import argparse
import shutil

def start_server(dev_mode=False):
    """Start the API server"""
    print(f"Starting {'development' if dev_mode else 'production'} server...")
    cmd = [
        "uvicorn",
        "src.main:app",
        "--host", "0.0.0.0",
        "--port", os.environ.get("PORT", "8080")
    ]

    if dev_mode:
        cmd.append("--reload")

    subprocess.run(cmd)

def run_tests(coverage=False):
    """Run the test suite"""
    print("Running tests...")
    cmd = [sys.executable, "-m", "pytest"]

    if coverage:
        cmd.extend(["--cov=src", "--cov-report=term", "--cov-report=html:coverage"])

    subprocess.run(cmd)

def validate_config():
    """Validate the current configuration"""
    from src.validate_config import main as validate_main
    validate_main()

def create_tables():
    """Initialize the user table"""
    from src.config.settings import settings
    from src.db.azure_tables import init_user_table
    print(f"Initializing table {settings.AZURE.TABLE_NAME}...")
    init_user_table()
    print("User table initialized.")

def clean():
    """Clean up temporary files and caches"""
    print("Cleaning up temporary files and caches...")

    for root, dirs, files in os.walk('.'):
        for skipped in ('venv', '.venv', '.git'):
            if skipped in dirs:
                dirs.remove(skipped)

        for cache_dir in ('__pycache__', '.pytest_cache'):
            if cache_dir in dirs:
                cache_path = os.path.join(root, cache_dir)
                print(f"Removing {cache_path}")
                shutil.rmtree(cache_path)
                dirs.remove(cache_dir)

        for file in files:
            if file.endswith('.pyc'):
                file_path = os.path.join(root, file)
                print(f"Removing {file_path}")
                os.remove(file_path)

    print("Cleanup complete.")

def main():
    parser = argparse.ArgumentParser(description="User CRUD API management script")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("start", help="Start the API server")
    subparsers.add_parser("dev", help="Start the development server with auto-reload")

    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument("--coverage", action="store_true", help="Generate coverage report")

    subparsers.add_parser("validate-config", help="Validate the current configuration")
    subparsers.add_parser("create-tables", help="Initialize the user table")
    subparsers.add_parser("clean", help="Clean up temporary files and caches")

    args = parser.parse_args()

    if args.command == "start":
        start_server(dev_mode=False)
    elif args.command == "dev":
        start_server(dev_mode=True)
    elif args.command == "test":
        run_tests(coverage=args.coverage)
    elif args.command == "validate-config":
        validate_config()
    elif args.command == "create-tables":
        create_tables()
    elif args.command == "clean":
        clean()
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
