"""Adapters layer - entry points built on the ports."""
