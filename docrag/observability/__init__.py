"""Logging configuration and request observability middleware."""
