r"""
'    .__                        .__  .__          __
'    |  | _____  ___________.__.|  | |__| _______/  |_
'    |  | \__  \ \___   <   |  ||  | |  |/  ___/\   __\
'    |  |__/ __ \_/    / \___  ||  |_|  |\___ \  |  |
'    |____(____  /_____ \/ ____||____/__/____  > |__|
'              \/      \/\/                  \/
"""

# expose the main classes
from .lazy_list import LazyList
from .cursor import Cursor

# expose the factory functions
from .factories import (
    from_producer,
    from_iterable,
    from_array,
    from_range,
    generate,
    repeat,
    empty,
    lazy,
    L,
)

# expose the producer outcome types
from .types import (
    Value,
    Skip,
    Stop,
    Outcome,
    Producer,
    SKIP,
    STOP,
)

# define what `import *` does
__all__ = [
    "LazyList",
    "Cursor",
    "from_producer",
    "from_iterable",
    "from_array",
    "from_range",
    "generate",
    "repeat",
    "empty",
    "lazy",
    "L",
    "Value",
    "Skip",
    "Stop",
    "Outcome",
    "Producer",
    "SKIP",
    "STOP",
]
