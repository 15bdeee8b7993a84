"""
sortdata/
---------
Core data layer.  Public API:

    from sortdata import Swap, SortBuffer
"""

from sortdata.swap   import Swap
from sortdata.buffer import SortBuffer

__all__ = [
    "Swap",
    "SortBuffer",
]
