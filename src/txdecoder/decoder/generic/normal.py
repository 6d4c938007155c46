"""Base metadata extraction: payload tokenizing and relayed-transaction unwrapping."""

import logging

from txdecoder.config import Settings, settings as default_settings
from txdecoder.decoder.handlers.relayed import (
    RELAYED_V1_ARGS,
    RELAYED_V2_ARGS,
    build_relayed_v1_transaction,
    build_relayed_v2_transaction,
)
from txdecoder.decoder.utils.codec import base64_decode, is_smart_contract_argument, parse_value
from txdecoder.decoder.utils.types import RawTransaction, TransactionMetadata
from txdecoder.domain.enums import BuiltInFunction

logger = logging.getLogger(__name__)

ARGUMENT_SEPARATOR = "@"

# JSON, pydantic and codec errors are all ValueError subclasses
_RELAYED_ERRORS = (ValueError, TypeError)


def split_payload(data: str) -> tuple[str | None, tuple[str, ...] | None]:
    """Decode a base64 payload into (function_name, args).

    Returns (None, None) when any argument is not byte-aligned hex, i.e. the
    payload is a plain note rather than a call.
    """
    components = base64_decode(data).split(ARGUMENT_SEPARATOR)
    args = tuple(components[1:])
    if not all(is_smart_contract_argument(arg) for arg in args):
        return None, None
    return components[0], args


def extract_normal_metadata(
    transaction: RawTransaction,
    settings: Settings | None = None,
    depth: int = 0,
) -> TransactionMetadata:
    """Base metadata for a transaction, recursing into relayed inner transactions."""
    settings = settings or default_settings

    function_name, function_args = split_payload(transaction.data) if transaction.data else (None, None)
    metadata = TransactionMetadata(
        sender=transaction.sender,
        receiver=transaction.receiver,
        value=parse_value(transaction.value),
        function_name=function_name,
        function_args=function_args,
    )

    inner = _relayed_inner_transaction(transaction, metadata, settings)
    if inner is None:
        return metadata

    if depth >= settings.max_relay_depth:
        logger.warning("Relayed nesting deeper than %d layers, not unwrapping further", settings.max_relay_depth)
        return metadata

    try:
        return extract_normal_metadata(inner, settings, depth + 1)
    except _RELAYED_ERRORS as exc:
        logger.debug("Inner %s transaction not decodable: %s", metadata.function_name, exc)
        return metadata


def _relayed_inner_transaction(
    transaction: RawTransaction,
    metadata: TransactionMetadata,
    settings: Settings,
) -> RawTransaction | None:
    args = metadata.function_args
    try:
        if metadata.function_name == BuiltInFunction.RELAYED_TX.value and len(args) == RELAYED_V1_ARGS:
            return build_relayed_v1_transaction(metadata, settings)
        if metadata.function_name == BuiltInFunction.RELAYED_TX_V2.value and len(args) == RELAYED_V2_ARGS:
            return build_relayed_v2_transaction(transaction, metadata, settings)
    except _RELAYED_ERRORS as exc:
        logger.debug("Malformed %s payload, keeping outer call: %s", metadata.function_name, exc)
    return None
