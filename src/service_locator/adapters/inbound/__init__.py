"""Inbound adapters for the service locator."""
