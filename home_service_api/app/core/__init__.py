"""Core infrastructure: settings, logging, record store and security."""
