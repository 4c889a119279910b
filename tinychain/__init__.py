"""An in-memory blockchain runtime with system, balances and proof-of-existence pallets."""

__version__ = "0.1.0"
__all__ = ["support", "system", "balances", "proof_of_existence", "runtime"]