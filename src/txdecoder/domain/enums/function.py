from enum import Enum


class BuiltInFunction(str, Enum):
    """Protocol built-in function names recognised in transaction payloads."""

    DCDT_TRANSFER = "DCDTTransfer"
    DCDT_NFT_TRANSFER = "DCDTNFTTransfer"
    MULTI_DCDT_NFT_TRANSFER = "MultiDCDTNFTTransfer"
    RELAYED_TX = "relayedTx"
    RELAYED_TX_V2 = "relayedTxV2"
