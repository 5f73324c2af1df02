"""Chain-state readers and snapshot capture."""

from betsettle.chain.base import ChainReader, ChainSnapshot, take_snapshot
from betsettle.chain.mock import MockChainReader

__all__ = ["ChainReader", "ChainSnapshot", "MockChainReader", "take_snapshot"]
