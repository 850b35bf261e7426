"""Escrow and result oracle for staked two-player matches on a simulated ledger."""

__version__ = "0.1.0"
__all__ = ["errors", "types", "ledger", "oracle", "escrow"]