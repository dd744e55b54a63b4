#!/usr/bin/env python3
"""
Setup script for the Lake Sonde Data Fetch
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""

import sys
import subprocess
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def check_python_version():
    """Check if Python version is compatible"""
    if sys.version_info < (3, 9):
        print("Error: Python 3.9 or higher is required")
        sys.exit(1)
    print(f"✓ Python {sys.version_info.major}.{sys.version_info.minor} detected")


def install_dependencies():
    """Install the project in editable mode with test extras"""
    print("Installing dependencies...")
    target = f"{PROJECT_ROOT}[test]"
    try:
        # Try uv first (faster)
        result = subprocess.run(['uv', 'pip', 'install', '-e', target],
                                capture_output=True, text=True)
        if result.returncode == 0:
            print("✓ Dependencies installed using uv")
            return
    except FileNotFoundError:
        pass

    # uv not found or failed, use pip
    try:
        subprocess.run([sys.executable, '-m', 'pip', 'install', '-e', target], check=True)
        print("✓ Dependencies installed using pip")
    except subprocess.CalledProcessError as e:
        print(f"Error installing dependencies: {e}")
        sys.exit(1)


def verify_env_file():
    """Check that .env exists and defines every variable in .env.example"""
    # Available only after install_dependencies
    from dotenv import dotenv_values

    env_path = PROJECT_ROOT / '.env'
    example_path = PROJECT_ROOT / '.env.example'

    if not env_path.exists():
        print("⚠ Warning: .env not found")
        print("Copy .env.example to .env and fill in your database credentials")
        return

    expected = dotenv_values(example_path).keys() if example_path.exists() else []
    actual = {key for key, value in dotenv_values(env_path).items() if value}
    missing = [key for key in expected if key not in actual]

    if missing:
        print(f"⚠ Warning: .env is missing values for: {missing}")
    else:
        print("✓ .env file found with all variables set")


def print_usage():
    """Show how to run the fetch from the project root"""
    print("\nTo fetch the table preview:")
    print("  python main.py   (or lake-fetch once installed)")
    print("\nTo read the entire table:")
    print("  python -m scripts.read_full_table")


def main():
    """Main setup function"""
    print("Setting up Lake Sonde Data Fetch...")
    print("=" * 50)

    check_python_version()
    install_dependencies()
    verify_env_file()

    print("=" * 50)
    print("✓ Setup complete!")
    print_usage()


if __name__ == "__main__":
    main()
