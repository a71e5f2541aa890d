"""Transports: HTTP dependencies, middleware and routes, plus stdio."""
