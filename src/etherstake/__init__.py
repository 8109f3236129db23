"""EtherStake - goal-based staking backend."""

__version__ = "0.1.0"
