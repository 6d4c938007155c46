from txdecoder.domain.enums.function import BuiltInFunction

__all__ = [
    "BuiltInFunction",
]
