from cumulus.types.maybe import NOTHING, Maybe, Nothing, Some, maybe

__all__ = [
    "NOTHING",
    "Maybe",
    "Nothing",
    "Some",
    "maybe",
]
