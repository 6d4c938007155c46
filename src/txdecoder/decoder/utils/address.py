"""Human-readable (bech32) account addresses."""

import bech32

from txdecoder.config import settings
from txdecoder.decoder.utils.codec import hex_to_bytes, is_hex
from txdecoder.exceptions import DecodeError


def is_valid_address(hex_str: str, length: int | None = None) -> bool:
    """True if the hex payload is a public key of the expected byte length."""
    return len(hex_to_bytes(hex_str)) == (length or settings.address_length)


def encode_address(hex_str: str, hrp: str | None = None, length: int | None = None) -> str:
    """Encode a hex public key as a bech32 address, e.g. ``drt1...``."""
    length = length or settings.address_length
    if not is_hex(hex_str) or not is_valid_address(hex_str, length):
        raise DecodeError(f"Not a {length}-byte public key: {hex_str!r}")
    words = bech32.convertbits(hex_to_bytes(hex_str), 8, 5)
    if words is None:
        raise DecodeError(f"Cannot pack public key {hex_str!r}")
    return bech32.bech32_encode(hrp or settings.address_hrp, words)


def decode_address(address: str, hrp: str | None = None, length: int | None = None) -> str:
    """Inverse of encode_address: bech32 address -> hex public key."""
    hrp = hrp or settings.address_hrp
    length = length or settings.address_length
    decoded_hrp, words = bech32.bech32_decode(address)
    if decoded_hrp is None or words is None:
        raise DecodeError(f"Invalid bech32 address: {address!r}")
    if decoded_hrp != hrp:
        raise DecodeError(f"Unexpected address prefix {decoded_hrp!r}, expected {hrp!r}")
    data = bech32.convertbits(words, 5, 8, False)
    if data is None or len(data) != length:
        raise DecodeError(f"Address does not hold a {length}-byte public key: {address!r}")
    return bytes(data).hex()
