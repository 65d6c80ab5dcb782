"""
Main CLI module for the Spanish ID validation service.

Validates NIF, NIE and CIF numbers given on the command line or read
from a file, printing one result per identifier.
Example: python -m services.spanish_id.main 33576428Q X6089822C
"""

import argparse
import json
import sys
from datetime import datetime
from typing import Iterable, List, Optional, TextIO, Tuple

# Support both package and standalone modes
try:
    from . import __version__
    from .helpers.validator import ValidationResult, validate_identifier
    from .log_config import configure_logging, get_logger, log_validation_batch
    from .settings import settings
except ImportError:
    # Standalone mode (e.g., running directly from the service directory)
    __version__ = "0.1.0"
    from helpers.validator import ValidationResult, validate_identifier
    from log_config import configure_logging, get_logger, log_validation_batch
    from settings import settings


logger = get_logger(__name__)


def read_identifiers(stream: TextIO) -> List[str]:
    """
    Read identifiers from a text stream, one per line.

    Blank lines and lines starting with '#' are skipped.
    """
    identifiers = []
    for line in stream:
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        identifiers.append(value)
    return identifiers


def load_identifiers(path: str) -> List[str]:
    """
    Load identifiers from a file path ('-' reads stdin).

    Raises:
        OSError: If the file cannot be read
    """
    if path == "-":
        return read_identifiers(sys.stdin)

    with open(path, encoding="utf-8") as handle:
        return read_identifiers(handle)


def format_result(result: ValidationResult, output_format: str) -> str:
    """Render one validation result as a JSON object or a text line."""
    if output_format == "json":
        return json.dumps(result.to_dict(), ensure_ascii=False)

    kind = result.kind.value if result.kind else "-"
    return "\t".join([
        result.value,
        result.status.value,
        kind,
        result.expected_check or "-",
        result.description or "-",
    ])


def validate_identifiers(
    identifiers: Iterable[str],
    strict: bool = False,
    output_format: str = "json",
    out: Optional[TextIO] = None,
) -> Tuple[int, int]:
    """
    Validate identifiers and print one result per identifier.

    Args:
        identifiers: Identifier strings to validate
        strict: Only describe identifiers with a correct check character
        output_format: "json" or "text"
        out: Output stream (defaults to stdout)

    Returns:
        Tuple of (valid_count, invalid_count)
    """
    out = out or sys.stdout
    valid = 0
    invalid = 0

    for identifier in identifiers:
        result = validate_identifier(identifier, strict=strict)
        print(format_result(result, output_format), file=out)

        if result.is_valid:
            logger.debug("Identifier valid", kind=result.kind.value)
            valid += 1
        else:
            logger.debug(
                "Identifier rejected",
                status=result.status.value,
                kind=result.kind.value if result.kind else None,
            )
            invalid += 1

    return valid, invalid


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Validate Spanish identification numbers (NIF, NIE, CIF)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m services.spanish_id 33576428Q X6089822C F43298256
  python -m services.spanish_id --file ids.txt --output text
  cat ids.txt | python -m services.spanish_id --file - --strict
        """
    )

    parser.add_argument(
        "identifiers",
        nargs="*",
        help="Identifiers to validate"
    )

    parser.add_argument(
        "--file",
        help="Read identifiers from a file, one per line ('-' for stdin)"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Only describe identifiers whose check character is correct"
    )

    parser.add_argument(
        "--output",
        choices=["json", "text"],
        help="Override result format from configuration"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration"
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Override log format from configuration"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Spanish ID validator {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 if every identifier is valid, 1 otherwise)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.log_level or args.log_format:
        configure_logging(args.log_level, args.log_format)

    config = settings()
    strict = config.strict_classification if args.strict is None else args.strict
    output_format = args.output or config.output_format

    try:
        identifiers = list(args.identifiers)
        if args.file:
            identifiers.extend(load_identifiers(args.file))

        if not identifiers:
            parser.print_usage(sys.stderr)
            logger.error("No identifiers given")
            return 1

        start_time = datetime.now()
        valid, invalid = validate_identifiers(identifiers, strict, output_format)
        duration_ms = (datetime.now() - start_time).total_seconds() * 1000

        log_validation_batch(
            logger,
            batch_id=f"validate_{int(start_time.timestamp())}",
            items_valid=valid,
            items_invalid=invalid,
            duration_ms=duration_ms,
            strict=strict,
        )

        return 0 if invalid == 0 else 1

    except KeyboardInterrupt:
        logger.warning("Validation interrupted by user")
        return 1
    except OSError as e:
        logger.error(
            "Could not read identifiers",
            path=args.file,
            error=str(e),
            error_type=type(e).__name__
        )
        return 1
    except Exception as e:
        logger.error(
            "Validation failed with unexpected error",
            error=str(e),
            error_type=type(e).__name__
        )
        return 1


def cli_main():
    """Synchronous entry point for setuptools console scripts."""
    return main()


if __name__ == "__main__":
    sys.exit(main())
