"""Adapters for inbound and outbound ports."""
