"""TransactionDecoder — raw transaction -> decoded metadata."""

from collections.abc import Mapping
from typing import Any

from txdecoder.config import Settings, settings as default_settings
from txdecoder.decoder.generic.normal import extract_normal_metadata
from txdecoder.decoder.registry import ClassifierRegistry, build_default_registry
from txdecoder.decoder.utils.types import RawTransaction, TransactionMetadata


class TransactionDecoder:
    """Runs base extraction, then the registry's classifiers in order.

    Stateless apart from read-only configuration; safe to share between threads.
    """

    def __init__(self, registry: ClassifierRegistry | None = None, settings: Settings | None = None) -> None:
        self._settings = settings or default_settings
        self._registry = build_default_registry(self._settings) if registry is None else registry

    def get_transaction_metadata(self, transaction: RawTransaction) -> TransactionMetadata:
        metadata = extract_normal_metadata(transaction, self._settings)

        for classifier in self._registry.get():
            result = classifier.try_classify(metadata)
            if result is not None:
                return result

        return metadata

    def decode(self, transaction: RawTransaction | Mapping[str, Any]) -> TransactionMetadata:
        """Like get_transaction_metadata, also accepting a plain mapping (e.g. API JSON)."""
        if not isinstance(transaction, RawTransaction):
            transaction = RawTransaction.model_validate(transaction)
        return self.get_transaction_metadata(transaction)
