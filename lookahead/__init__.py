from .fused import Fused, FusedState
from .lookahead import ExactLookahead, Lookahead, lookahead
from .size_hint import SizeHint, size_hint_of

__all__ = [
    "Lookahead",
    "ExactLookahead",
    "lookahead",
    "Fused",
    "FusedState",
    "SizeHint",
    "size_hint_of",
]
