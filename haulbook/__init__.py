"""Partner consolidation (fusion) service for the haulage ledger."""

__version__ = "0.1.0"
