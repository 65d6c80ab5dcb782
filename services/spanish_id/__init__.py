"""
Spanish identification number validator

Validates NIF, NIE and CIF numbers with:
- Positional format rules and check character algorithms
- Category descriptions for the leading character
- Pydantic settings for configuration
- Structured JSON logging with structlog
- CLI interface
"""

__version__ = "0.1.0"
