import pytest

from txdecoder.config import Settings
from txdecoder.decoder.transaction_decoder import TransactionDecoder


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def decoder(settings) -> TransactionDecoder:
    return TransactionDecoder(settings=settings)
