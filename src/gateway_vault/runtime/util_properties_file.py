# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Loader for Java-style properties files such as guacamole.properties.

Follows the line-oriented format read by ``java.util.Properties.load``:
    - ``key=value``, ``key: value`` and ``key value`` entries
    - ``#`` and ``!`` comment lines
    - An odd number of trailing backslashes joins a line with the next one;
      leading whitespace of the continuation line is dropped
    - Backslash escapes in keys and values: ``\\t``, ``\\n``, ``\\r``, ``\\f``,
      ``\\uXXXX``, and ``\\`` followed by any other character yields that
      character (so ``\\\\``, ``\\=``, ``\\:``, ``\\ `` and ``\\#`` are literal)
    - Later entries override earlier entries with the same key

Unlike Java, trailing unescaped whitespace is removed from values. An
escaped trailing space (``\\ ``) is kept.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode

from gateway_vault.enums import EnumInfraTransportType
from gateway_vault.errors import ModelInfraErrorContext, ProtocolConfigurationError

logger = logging.getLogger(__name__)

# Maximum file size for properties files (1MB)
MAX_PROPERTIES_FILE_SIZE: Final[int] = 1024 * 1024

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")

_WHITESPACE: Final[str] = " \t\f"

_SEPARATORS: Final[str] = "=:"

_CONTROL_ESCAPES: Final[dict[str, str]] = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}

_HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")


def _logical_lines(text: str) -> list[str]:
    """Join continuation lines and drop blanks and comments."""
    lines: list[str] = []
    pending = ""
    continuing = False
    for raw_line in _LINE_BREAK.split(text):
        line = raw_line.lstrip(_WHITESPACE)
        if not continuing and (not line or line[0] in "#!"):
            continue

        # An odd number of trailing backslashes continues the line
        stripped = line.rstrip("\\")
        if (len(line) - len(stripped)) % 2 == 1:
            pending += line[:-1]
            continuing = True
            continue

        lines.append(pending + line)
        pending = ""
        continuing = False

    if pending:
        lines.append(pending)
    return lines


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value."""
    length = len(line)
    index = 0
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key_end = min(index, length)

    index = key_end
    while index < length and line[index] in _WHITESPACE:
        index += 1
    if index < length and line[index] in _SEPARATORS:
        index += 1
    while index < length and line[index] in _WHITESPACE:
        index += 1

    return line[:key_end], line[index:]


def _unescape(text: str) -> tuple[str, int]:
    """Decode backslash escapes.

    Returns:
        The decoded text and the length of its prefix that excludes trailing
        unescaped whitespace.

    Raises:
        ProtocolConfigurationError: If a ``\\u`` escape is not followed by
            four hexadecimal digits.
    """
    decoded: list[str] = []
    keep = 0
    length = len(text)
    index = 0
    while index < length:
        char = text[index]
        index += 1
        if char != "\\":
            decoded.append(char)
            if char not in _WHITESPACE:
                keep = len(decoded)
            continue

        if index == length:
            # Dangling backslash at end of input
            break
        char = text[index]
        index += 1
        if char == "u":
            digits = text[index : index + 4]
            if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
                raise ProtocolConfigurationError(
                    "Malformed \\uXXXX escape in properties file",
                    context=ModelInfraErrorContext.with_correlation(
                        transport_type=EnumInfraTransportType.RUNTIME,
                        operation="parse_properties",
                    ),
                    error_code=EnumCoreErrorCode.CONFIGURATION_PARSE_ERROR,
                )
            char = chr(int(digits, 16))
            index += 4
        else:
            char = _CONTROL_ESCAPES.get(char, char)
        decoded.append(char)
        keep = len(decoded)

    return "".join(decoded), keep


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dictionary.

    Args:
        text: Contents of a properties file.

    Returns:
        Mapping of property name to string value with escapes decoded.

    Raises:
        ProtocolConfigurationError: If the text holds a malformed ``\\u``
            escape.
    """
    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key, _ = _unescape(raw_key)
        value, keep = _unescape(raw_value)
        properties[key] = value[:keep]
    return properties


def load_properties_file(path: Path) -> dict[str, str]:
    """Load a properties file from disk.

    A missing file is not an error and yields an empty mapping; the gateway
    runs with defaults when no properties file exists.

    Args:
        path: Location of the properties file.

    Returns:
        Parsed properties.

    Raises:
        ProtocolConfigurationError: If the file exists but is too large,
            is not a regular file, cannot be read or decoded, or holds a
            malformed escape.
    """
    if not path.exists():
        logger.debug("Properties file not found, using defaults: %s", path)
        return {}

    context = ModelInfraErrorContext.with_correlation(
        transport_type=EnumInfraTransportType.RUNTIME,
        operation="load_properties_file",
        target_name=path.name,
    )

    if not path.is_file():
        raise ProtocolConfigurationError(
            f"Properties path is not a file: {path}",
            context=context,
        )

    size = path.stat().st_size
    if size > MAX_PROPERTIES_FILE_SIZE:
        raise ProtocolConfigurationError(
            f"Properties file exceeds maximum size of {MAX_PROPERTIES_FILE_SIZE} bytes: {path}",
            context=context,
            file_size=size,
        )

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProtocolConfigurationError(
            f"Failed to read properties file: {path}",
            context=context,
        ) from e

    properties = parse_properties(text)
    logger.debug("Loaded %d properties from %s", len(properties), path)
    return properties


__all__: list[str] = [
    "MAX_PROPERTIES_FILE_SIZE",
    "load_properties_file",
    "parse_properties",
]
