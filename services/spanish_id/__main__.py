"""
Entry point for running the validator as a module.

Usage:
    python -m services.spanish_id [identifiers...]
"""

from .main import main

if __name__ == "__main__":
    exit(main())
