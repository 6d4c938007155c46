"""Inner transactions of fee-sponsored (relayed) envelopes.

relayedTx@<hex(json)>: the JSON carries the inner sender/receiver as base64
public keys, the value and the base64 payload.
relayedTxV2@<receiver>@<nonce>@<data>@<signature>: the inner sender is the
outer receiver and no value is moved.

Both builders raise on malformed input; callers decide whether to fall back.
"""

import json
from typing import Any

from pydantic import BaseModel, field_validator

from txdecoder.config import Settings
from txdecoder.decoder.utils.address import encode_address
from txdecoder.decoder.utils.codec import base64_encode, base64_to_hex, hex_to_text
from txdecoder.decoder.utils.types import RawTransaction, TransactionMetadata

RELAYED_V1_ARGS = 1
RELAYED_V2_ARGS = 4


class RelayedV1Payload(BaseModel):
    """JSON body of a relayedTx argument. Extra fields (nonce, gasLimit, signature, ...) are ignored."""

    sender: str  # base64 public key
    receiver: str  # base64 public key
    value: str
    data: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _value_as_string(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("data", mode="before")
    @classmethod
    def _data_or_empty(cls, v: Any) -> Any:
        return "" if v is None else v


def build_relayed_v1_transaction(metadata: TransactionMetadata, settings: Settings) -> RawTransaction:
    payload = RelayedV1Payload.model_validate(json.loads(hex_to_text(metadata.function_args[0])))
    return RawTransaction(
        sender=encode_address(base64_to_hex(payload.sender), settings.address_hrp, settings.address_length),
        receiver=encode_address(base64_to_hex(payload.receiver), settings.address_hrp, settings.address_length),
        value=payload.value,
        data=payload.data,
    )


def build_relayed_v2_transaction(
    outer: RawTransaction,
    metadata: TransactionMetadata,
    settings: Settings,
) -> RawTransaction:
    args = metadata.function_args
    return RawTransaction(
        sender=outer.receiver,
        receiver=encode_address(args[0], settings.address_hrp, settings.address_length),
        value="0",
        data=base64_encode(hex_to_text(args[2])),
    )
