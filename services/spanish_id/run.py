#!/usr/bin/env python
"""
Standalone entry point for the Spanish ID validator.

This script can be run directly without package installation.
"""

if __name__ == "__main__":
    from main import main
    exit(main())
