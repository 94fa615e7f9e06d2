"""Adapters — Discord and HTTP implementations of the ports."""
