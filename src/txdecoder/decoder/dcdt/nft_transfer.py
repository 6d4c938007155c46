"""DCDTNFTTransfer — NFT/SFT/meta-DCDT transfer.

The call is sent to the sender's own account; the real receiver is the 4th argument.
Payload: DCDTNFTTransfer@<collection>@<nonce>@<value>@<receiver>[@<function>@<arg>...]
"""

from txdecoder.decoder.generic.base import BaseClassifier
from txdecoder.decoder.utils.address import encode_address, is_valid_address
from txdecoder.decoder.utils.codec import hex_to_int, hex_to_text
from txdecoder.decoder.utils.types import MetadataTransfer, TransactionMetadata, TransferProperties
from txdecoder.domain.enums import BuiltInFunction


def nft_identifier(collection: str, nonce: str) -> str:
    return f"{collection}-{nonce}"


class NftTransferClassifier(BaseClassifier):
    CLASSIFIER_NAME = "NftTransferClassifier"
    FUNCTION_NAME = BuiltInFunction.DCDT_NFT_TRANSFER.value
    MIN_ARGS = 4

    def can_classify(self, metadata: TransactionMetadata) -> bool:
        if metadata.sender != metadata.receiver:
            return False
        if not super().can_classify(metadata):
            return False
        return is_valid_address(metadata.function_args[3], self._settings.address_length)

    def classify(self, metadata: TransactionMetadata) -> TransactionMetadata | None:
        args = metadata.function_args
        collection = hex_to_text(args[0])
        nonce = args[1]
        value = hex_to_int(args[2])
        receiver = encode_address(args[3], self._settings.address_hrp, self._settings.address_length)

        transfer = MetadataTransfer(
            value=value,
            properties=TransferProperties(collection=collection, identifier=nft_identifier(collection, nonce)),
        )
        return self._make_result(metadata, [transfer], args[4:], receiver=receiver, value=value)
