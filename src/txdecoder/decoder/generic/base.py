"""Base classifier interface."""

import logging
from abc import ABC, abstractmethod

from txdecoder.config import Settings, settings as default_settings
from txdecoder.decoder.utils.codec import hex_to_text
from txdecoder.decoder.utils.types import MetadataTransfer, TransactionMetadata

logger = logging.getLogger(__name__)


class BaseClassifier(ABC):
    """Re-interprets a generic smart-contract call as a structured transfer.

    Subclasses declare the built-in function they handle and implement
    can_classify/classify. Non-matching input is declined, never raised.
    """

    CLASSIFIER_NAME: str = "BaseClassifier"
    FUNCTION_NAME: str = ""
    MIN_ARGS: int = 0

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or default_settings

    def can_classify(self, metadata: TransactionMetadata) -> bool:
        """Quick check on function name and argument count."""
        return (
            metadata.function_name == self.FUNCTION_NAME
            and metadata.function_args is not None
            and len(metadata.function_args) >= self.MIN_ARGS
        )

    @abstractmethod
    def classify(self, metadata: TransactionMetadata) -> TransactionMetadata | None:
        """Build the specialized metadata, or None if the arguments do not describe this transfer."""

    def try_classify(self, metadata: TransactionMetadata) -> TransactionMetadata | None:
        if not self.can_classify(metadata):
            return None
        result = self.classify(metadata)
        if result is not None:
            logger.debug("%s matched %s", self.CLASSIFIER_NAME, metadata.function_name)
        return result

    def _make_result(
        self,
        metadata: TransactionMetadata,
        transfers: list[MetadataTransfer],
        nested_args: list[str] | tuple[str, ...],
        *,
        receiver: str | None = None,
        value: int = 0,
    ) -> TransactionMetadata:
        """Helper: carry the sender over and split any nested call off the remaining arguments."""
        function_name = None
        function_args = None
        if nested_args:
            function_name = hex_to_text(nested_args[0])
            function_args = tuple(nested_args[1:])
        return TransactionMetadata(
            sender=metadata.sender,
            receiver=metadata.receiver if receiver is None else receiver,
            value=value,
            function_name=function_name,
            function_args=function_args,
            transfers=tuple(transfers),
        )
