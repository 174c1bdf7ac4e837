"""Adapters – transports to external systems."""
