"""Digit arithmetic shared by the checksum algorithms."""


def sum_digits(value: int) -> int:
    """
    Sum the decimal digits of a non-negative integer.

    Examples:
        >>> sum_digits(12345)
        15
        >>> sum_digits(16)
        7
    """
    if value < 0:
        raise ValueError(f"sum_digits expects a non-negative integer, got {value}")

    total = 0
    while value:
        value, digit = divmod(value, 10)
        total += digit
    return total


def parse_digits(text: str) -> int:
    """
    Parse a run of ASCII digits into an integer.

    Raises:
        ValueError: If any character is not an ASCII digit
    """
    if not text or any(char not in "0123456789" for char in text):
        raise ValueError(f"Expected ASCII digits, got '{text}'")
    return int(text)
