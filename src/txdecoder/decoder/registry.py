"""ClassifierRegistry — ordered transfer classifiers, first match wins."""

from txdecoder.config import Settings
from txdecoder.decoder.generic.base import BaseClassifier


class ClassifierRegistry:
    """Ordered list of transfer classifiers tried against base metadata.

    Order matters: the first classifier that does not decline wins.
    """

    def __init__(self) -> None:
        self._classifiers: list[BaseClassifier] = []

    def register(self, classifier: BaseClassifier) -> None:
        self._classifiers.append(classifier)

    def get(self) -> list[BaseClassifier]:
        return list(self._classifiers)

    def __len__(self) -> int:
        return len(self._classifiers)


def build_default_registry(settings: Settings | None = None) -> ClassifierRegistry:
    """Create a ClassifierRegistry with the built-in transfer classifiers: DCDT, then NFT, then multi."""
    from txdecoder.decoder.dcdt.multi_transfer import MultiTransferClassifier
    from txdecoder.decoder.dcdt.nft_transfer import NftTransferClassifier
    from txdecoder.decoder.dcdt.transfer import DcdtTransferClassifier

    registry = ClassifierRegistry()
    registry.register(DcdtTransferClassifier(settings))
    registry.register(NftTransferClassifier(settings))
    registry.register(MultiTransferClassifier(settings))
    return registry
