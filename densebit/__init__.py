"""Top-level package for densebit."""

import importlib.metadata

from densebit.api import *  # noqa: F401,F403
from densebit.bitgraph import BitGraph  # noqa: F401
from densebit.bitset import BitSet, EmptySetError  # noqa: F401

__version__ = importlib.metadata.version(__name__)
