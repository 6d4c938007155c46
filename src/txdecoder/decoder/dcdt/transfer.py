"""DCDTTransfer — single fungible token transfer.

Payload: DCDTTransfer@<token>@<value>[@<function>@<arg>...]
"""

from txdecoder.decoder.generic.base import BaseClassifier
from txdecoder.decoder.utils.codec import hex_to_int, hex_to_text
from txdecoder.decoder.utils.types import MetadataTransfer, TransactionMetadata, TransferProperties
from txdecoder.domain.enums import BuiltInFunction


class DcdtTransferClassifier(BaseClassifier):
    CLASSIFIER_NAME = "DcdtTransferClassifier"
    FUNCTION_NAME = BuiltInFunction.DCDT_TRANSFER.value
    MIN_ARGS = 2

    def classify(self, metadata: TransactionMetadata) -> TransactionMetadata | None:
        args = metadata.function_args
        token_identifier = hex_to_text(args[0])
        value = hex_to_int(args[1])

        transfer = MetadataTransfer(value=value, properties=TransferProperties(identifier=token_identifier))
        return self._make_result(metadata, [transfer], args[2:], value=value)
