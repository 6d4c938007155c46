from txdecoder.config import Settings
from txdecoder.decoder.dcdt.nft_transfer import NftTransferClassifier, nft_identifier
from txdecoder.decoder.utils.address import encode_address
from txdecoder.decoder.utils.types import TransactionMetadata

ALICE_HEX = "0139472eff6886771a982f3083da5d421f24c29181e63888228dc81ca60d69e1"
BOB_HEX = "8049d639e5a6980d1cd2392abcce41029cda74a1563523a202f09641cc2618f8"
ALICE = encode_address(ALICE_HEX)
BOB = encode_address(BOB_HEX)
NFT_ABC = "4e46542d616263"  # "NFT-abc"
BUY = "627579"  # "buy"


def _metadata(*args: str, receiver: str = ALICE) -> TransactionMetadata:
    return TransactionMetadata(
        sender=ALICE,
        receiver=receiver,
        function_name="DCDTNFTTransfer",
        function_args=list(args),
    )


class TestNftIdentifier:
    def test_compose(self):
        assert nft_identifier("NFT-abc", "05") == "NFT-abc-05"


class TestNftTransferClassifier:
    def test_basic_transfer(self):
        result = NftTransferClassifier().try_classify(_metadata(NFT_ABC, "05", "01", BOB_HEX))
        assert result is not None
        assert result.sender == ALICE
        assert result.receiver == BOB
        assert result.value == 1
        assert result.function_name is None
        assert len(result.transfers) == 1
        props = result.transfers[0].properties
        assert props.collection == "NFT-abc"
        assert props.identifier == "NFT-abc-05"
        assert props.token is None
        assert result.transfers[0].value == 1

    def test_nonce_kept_as_raw_hex(self):
        result = NftTransferClassifier().try_classify(_metadata(NFT_ABC, "0A1b", "01", BOB_HEX))
        assert result.transfers[0].properties.identifier == "NFT-abc-0A1b"

    def test_nested_call(self):
        result = NftTransferClassifier().try_classify(_metadata(NFT_ABC, "05", "01", BOB_HEX, BUY, "0f"))
        assert result.function_name == "buy"
        assert result.function_args == ("0f",)

    def test_declines_when_sender_differs_from_receiver(self):
        assert NftTransferClassifier().try_classify(_metadata(NFT_ABC, "05", "01", BOB_HEX, receiver=BOB)) is None

    def test_declines_too_few_args(self):
        assert NftTransferClassifier().try_classify(_metadata(NFT_ABC, "05", "01")) is None

    def test_declines_invalid_receiver(self):
        assert NftTransferClassifier().try_classify(_metadata(NFT_ABC, "05", "01", "abcd")) is None

    def test_declines_own_output(self):
        classifier = NftTransferClassifier()
        result = classifier.try_classify(_metadata(NFT_ABC, "05", "01", BOB_HEX))
        assert classifier.try_classify(result) is None


class TestConfiguredAddressLength:
    def test_short_keys_classified(self):
        settings = Settings(address_length=20)
        result = NftTransferClassifier(settings).try_classify(_metadata(NFT_ABC, "05", "01", "22" * 20))
        assert result is not None
        assert result.receiver == encode_address("22" * 20, length=20)

    def test_default_length_key_declined(self):
        settings = Settings(address_length=20)
        assert NftTransferClassifier(settings).try_classify(_metadata(NFT_ABC, "05", "01", BOB_HEX)) is None
