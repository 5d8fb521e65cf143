# src/realloc/utils/units.py
"""
Parsing of human-supplied resource quantities into the values the container
runtime expects.

Each parser returns a ``(value, units)`` pair or raises ResourceParseError.
"""

import re
import string
from typing import Tuple

from ..core.exceptions import ResourceParseError

MIN_SHARES = 2
SHARES_PER_CPU = 1024
MILLI_CPU_TO_CPU = 1000

BANDWIDTH_UNITS = ("kbps", "mbps", "gbps")

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


def cpu_for_runtime(milli_cpu: int) -> int:
    """Converts millicores to runtime CPU shares, never below MIN_SHARES."""
    if milli_cpu == 0:
        return MIN_SHARES

    shares = (milli_cpu * SHARES_PER_CPU) // MILLI_CPU_TO_CPU
    if shares < MIN_SHARES:
        return MIN_SHARES
    return shares


def to_int64(digits: str, resource: str) -> int:
    """Converts a digit run to int, rejecting anything outside the signed 64-bit range."""
    value = int(digits)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ResourceParseError(f"{resource} value out of range ({digits})")
    return value


def split_quantity(quantity: str) -> Tuple[str, str]:
    """
    Splits a quantity into its digit run and its letter run.

    Characters are collected in order into two separate sequences, so
    interleaving is ignored ("2M5i" -> ("25", "Mi")). Anything that is neither
    an ASCII digit nor an ASCII letter is dropped.
    """
    digits = []
    letters = []
    for char in quantity:
        if char in _LETTERS:
            letters.append(char)
        elif char in _DIGITS:
            digits.append(char)
    return "".join(digits), "".join(letters)


def parse_cpu(cpu: str) -> Tuple[int, str]:
    """Parses a millicore string such as '500m' into runtime CPU shares."""
    if "m" not in cpu:
        raise ResourceParseError("cpu must be specified in millicores")

    number = cpu.split("m", 1)[0]
    if not re.fullmatch(r"[+-]?\d+", number, re.ASCII):
        raise ResourceParseError(f"invalid cpu value ({number!r})")

    shares = cpu_for_runtime(to_int64(number, "cpu"))
    return to_int64(str(shares), "cpu"), ""


def parse_memory(memory: str) -> Tuple[int, str]:
    """Parses '256Mi' style memory into (256, 'M')."""
    digits, letters = split_quantity(memory)
    if not digits:
        raise ResourceParseError("invalid memory value")

    units = letters.replace("i", "", 1).upper()
    if len(units) > 1:
        raise ResourceParseError("invalid memory format")

    return to_int64(digits, "memory"), units


def parse_bandwidth(bandwidth: str) -> Tuple[int, str]:
    """Parses '10Mbps' style bandwidth into (10, 'mbps')."""
    digits, letters = split_quantity(bandwidth)
    if not digits:
        raise ResourceParseError("invalid bandwidth value")

    units = letters.lower()
    if units not in BANDWIDTH_UNITS:
        raise ResourceParseError("invalid bandwidth units")

    return to_int64(digits, "bandwidth"), units


def burst_units(rate_units: str) -> str:
    """Strips the trailing 'bps' characters of a rate unit: 'mbps' -> 'm'."""
    return rate_units.rstrip("bps")
