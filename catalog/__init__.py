"""Clients for external book catalogs."""
