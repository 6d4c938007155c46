from dependency_injector import containers, providers

from txdecoder.config import Settings
from txdecoder.decoder.registry import build_default_registry
from txdecoder.decoder.transaction_decoder import TransactionDecoder


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    registry = providers.Singleton(
        build_default_registry,
        settings=settings,
    )

    decoder = providers.Singleton(
        TransactionDecoder,
        registry=registry,
        settings=settings,
    )
