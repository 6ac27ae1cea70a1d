"""
           _
 _ __ ___ (_)_ __  ___  ___  __ _
| '_ ` _ \| | '_ \/ __|/ _ \/ _` |
| | | | | | | | | \__ \  __/ (_| |
|_| |_| |_|_|_| |_|___/\___|\__, |
                               |_|
"""

# expose the main classes
from .sequence import Sequence, sequence_equal
from .maybe import Maybe, NOTHING

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    from_range,
    repeat,
    generate,
    empty,
    S,
    seq
)

# expose supporting types
from .types import Pair, UnsupportedOperationError
from .iterators import LookaheadIterator

# define what `import *` does
__all__ = [
    "Sequence",
    "sequence_equal",
    "Maybe",
    "NOTHING",
    "from_iterable",
    "of",
    "from_range",
    "repeat",
    "generate",
    "empty",
    "S",
    "seq",
    "Pair",
    "UnsupportedOperationError",
    "LookaheadIterator"
]
