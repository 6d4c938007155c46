"""Core data types for the transaction decoder."""

from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel


class RawTransaction(BaseModel):
    """Transaction envelope as submitted on chain (before decoding)."""

    model_config = ConfigDict(frozen=True)

    sender: str
    receiver: str
    value: str = "0"  # decimal string, smallest unit
    data: str = ""  # base64 payload

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


class TransferProperties(BaseModel):
    """Token tagging of one transfer: `token` for fungible, `collection` + `identifier` for NFT/SFT."""

    model_config = ConfigDict(frozen=True)

    token: str | None = None
    collection: str | None = None
    identifier: str | None = None


class MetadataTransfer(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: NonNegativeInt = 0
    properties: TransferProperties

    @field_serializer("value", when_used="json")
    def _value_to_string(self, v: int) -> str:
        return str(v)


class TransactionMetadata(BaseModel):
    """Decoded view of a transaction. Immutable; classifiers build a new one instead of mutating."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    sender: str = ""
    receiver: str = ""
    value: NonNegativeInt = 0
    function_name: str | None = None
    function_args: tuple[str, ...] | None = None
    transfers: tuple[MetadataTransfer, ...] | None = None

    @model_validator(mode="after")
    def _function_args_follow_name(self) -> "TransactionMetadata":
        if (self.function_name is None) != (self.function_args is None):
            raise ValueError("function_name and function_args must be set together")
        return self

    @field_serializer("value", when_used="json")
    def _value_to_string(self, v: int) -> str:
        return str(v)

    @property
    def has_function_call(self) -> bool:
        return self.function_name is not None

    def to_dict(self) -> dict[str, Any]:
        """Wire shape for downstream consumers: camelCase keys, absent fields omitted, integers as strings."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
