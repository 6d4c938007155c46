from txdecoder.config import Settings
from txdecoder.decoder.dcdt.multi_transfer import MultiTransferClassifier
from txdecoder.decoder.utils.address import encode_address
from txdecoder.decoder.utils.types import TransactionMetadata

ALICE_HEX = "0139472eff6886771a982f3083da5d421f24c29181e63888228dc81ca60d69e1"
BOB_HEX = "8049d639e5a6980d1cd2392abcce41029cda74a1563523a202f09641cc2618f8"
ALICE = encode_address(ALICE_HEX)
BOB = encode_address(BOB_HEX)
ABC_123 = "4142432d313233"  # "ABC-123"
NFT_ABC = "4e46542d616263"  # "NFT-abc"
CLAIM = "636c61696d"  # "claim"


def _metadata(*args: str, receiver: str = ALICE) -> TransactionMetadata:
    return TransactionMetadata(
        sender=ALICE,
        receiver=receiver,
        value=0,
        function_name="MultiDCDTNFTTransfer",
        function_args=list(args),
    )


class TestMultiTransferClassifier:
    def test_fungible_and_nft(self):
        result = MultiTransferClassifier().try_classify(
            _metadata(BOB_HEX, "02", ABC_123, "", "0a", NFT_ABC, "05", "01"),
        )
        assert result is not None
        assert result.sender == ALICE
        assert result.receiver == BOB
        assert result.value == 0
        assert result.function_name is None
        assert len(result.transfers) == 2

        fungible, nft = result.transfers
        assert fungible.value == 10
        assert fungible.properties.token == "ABC-123"
        assert fungible.properties.collection is None
        assert fungible.properties.identifier is None

        assert nft.value == 1
        assert nft.properties.collection == "NFT-abc"
        assert nft.properties.identifier == "NFT-abc-05"
        assert nft.properties.token is None

    def test_nested_call_after_transfers(self):
        result = MultiTransferClassifier().try_classify(
            _metadata(BOB_HEX, "01", ABC_123, "", "0a", CLAIM, "01", "02"),
        )
        assert len(result.transfers) == 1
        assert result.function_name == "claim"
        assert result.function_args == ("01", "02")

    def test_zero_transfers(self):
        result = MultiTransferClassifier().try_classify(_metadata(BOB_HEX, "00", CLAIM))
        assert result is not None
        assert result.transfers == ()
        assert result.function_name == "claim"
        assert result.function_args == ()

    def test_declines_when_count_exceeds_args(self):
        assert MultiTransferClassifier().try_classify(_metadata(BOB_HEX, "02", ABC_123, "", "0a")) is None

    def test_declines_when_sender_differs_from_receiver(self):
        assert MultiTransferClassifier().try_classify(
            _metadata(BOB_HEX, "01", ABC_123, "", "0a", receiver=BOB),
        ) is None

    def test_declines_too_few_args(self):
        assert MultiTransferClassifier().try_classify(_metadata(BOB_HEX, "00")) is None

    def test_declines_invalid_receiver(self):
        assert MultiTransferClassifier().try_classify(_metadata("abcd", "01", ABC_123, "", "0a")) is None

    def test_declines_own_output(self):
        classifier = MultiTransferClassifier()
        result = classifier.try_classify(_metadata(BOB_HEX, "01", ABC_123, "", "0a"))
        assert classifier.try_classify(result) is None


class TestConfiguredAddressLength:
    def test_short_receiver_classified(self):
        settings = Settings(address_length=20)
        result = MultiTransferClassifier(settings).try_classify(_metadata("33" * 20, "01", ABC_123, "", "0a"))
        assert result is not None
        assert result.receiver == encode_address("33" * 20, length=20)
        assert result.transfers[0].properties.token == "ABC-123"
