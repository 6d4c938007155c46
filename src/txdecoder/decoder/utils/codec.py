"""Scalar conversions between the payload encodings (hex, base64, text, integers).

Text is always handled as Latin-1 so every conversion preserves bytes.
"""

import base64
import re

from txdecoder.exceptions import DecodeError

_HEX_RE = re.compile(r"[a-fA-F0-9]*")
_HEX_PAIRS_RE = re.compile(r"(?:[a-fA-F0-9]{2})*")
_BASE64_NOISE_RE = re.compile(r"[^A-Za-z0-9+/]")
_DECIMAL_RE = re.compile(r"[0-9]+")

TEXT_ENCODING = "latin-1"


def is_hex(value: str) -> bool:
    return _HEX_RE.fullmatch(value) is not None


def is_smart_contract_argument(arg: str) -> bool:
    """Arguments are hex-encoded and byte aligned."""
    return is_hex(arg) and len(arg) % 2 == 0


def hex_to_bytes(hex_str: str) -> bytes:
    """Permissive hex decode: keeps the longest prefix of complete byte pairs."""
    return bytes.fromhex(_HEX_PAIRS_RE.match(hex_str).group(0))


def hex_to_text(hex_str: str) -> str:
    return hex_to_bytes(hex_str).decode(TEXT_ENCODING)


def text_to_hex(text: str) -> str:
    return text.encode(TEXT_ENCODING).hex()


def hex_to_int(hex_str: str) -> int:
    """Unsigned base-16 integer. Empty input is 0."""
    if not hex_str:
        return 0
    if not is_hex(hex_str):
        raise DecodeError(f"Not a hex integer: {hex_str!r}")
    return int(hex_str, 16)


def hex_to_number(hex_str: str) -> int:
    """Small counts (e.g. number of transfers). Same rules as hex_to_int."""
    return hex_to_int(hex_str)


def parse_value(value: str) -> int:
    """Native value from its decimal string form. Empty input is 0."""
    stripped = value.strip()
    if not stripped:
        return 0
    if not _DECIMAL_RE.fullmatch(stripped):
        raise DecodeError(f"Invalid transaction value: {value!r}")
    try:
        return int(stripped)
    except ValueError as exc:
        # Beyond the interpreter's int-string digit limit
        raise DecodeError(f"Transaction value too long: {len(stripped)} digits") from exc


def base64_to_bytes(data: str) -> bytes:
    """Permissive base64 decode: URL-safe alphabet accepted, padding optional, stray characters ignored."""
    cleaned = _BASE64_NOISE_RE.sub("", data.replace("-", "+").replace("_", "/"))
    # A single dangling character carries no complete byte
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)


def base64_decode(data: str) -> str:
    return base64_to_bytes(data).decode(TEXT_ENCODING)


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode(TEXT_ENCODING)).decode("ascii")


def base64_to_hex(data: str) -> str:
    return base64_to_bytes(data).hex()
