"""MultiDCDTNFTTransfer — several fungible and non-fungible transfers in one call.

Payload: MultiDCDTNFTTransfer@<receiver>@<count>{@<token>@<nonce>@<value>}*count[@<function>@<arg>...]
An empty nonce marks a fungible token.
"""

import logging

from txdecoder.decoder.dcdt.nft_transfer import nft_identifier
from txdecoder.decoder.generic.base import BaseClassifier
from txdecoder.decoder.utils.address import encode_address, is_valid_address
from txdecoder.decoder.utils.codec import hex_to_int, hex_to_number, hex_to_text
from txdecoder.decoder.utils.types import MetadataTransfer, TransactionMetadata, TransferProperties
from txdecoder.domain.enums import BuiltInFunction

logger = logging.getLogger(__name__)

ARGS_PER_TRANSFER = 3


class MultiTransferClassifier(BaseClassifier):
    CLASSIFIER_NAME = "MultiTransferClassifier"
    FUNCTION_NAME = BuiltInFunction.MULTI_DCDT_NFT_TRANSFER.value
    MIN_ARGS = 3

    def can_classify(self, metadata: TransactionMetadata) -> bool:
        if metadata.sender != metadata.receiver:
            return False
        if not super().can_classify(metadata):
            return False
        return is_valid_address(metadata.function_args[0], self._settings.address_length)

    def classify(self, metadata: TransactionMetadata) -> TransactionMetadata | None:
        args = metadata.function_args
        receiver = encode_address(args[0], self._settings.address_hrp, self._settings.address_length)
        transfer_count = hex_to_number(args[1])

        index = 2
        if index + transfer_count * ARGS_PER_TRANSFER > len(args):
            logger.debug("MultiDCDTNFTTransfer declares %d transfers but has %d args", transfer_count, len(args))
            return None

        transfers: list[MetadataTransfer] = []
        for _ in range(transfer_count):
            identifier = hex_to_text(args[index])
            nonce = args[index + 1]
            value = hex_to_int(args[index + 2])
            index += ARGS_PER_TRANSFER

            if nonce:
                properties = TransferProperties(collection=identifier, identifier=nft_identifier(identifier, nonce))
            else:
                properties = TransferProperties(token=identifier)
            transfers.append(MetadataTransfer(value=value, properties=properties))

        return self._make_result(metadata, transfers, args[index:], receiver=receiver)
