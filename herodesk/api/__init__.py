"""
In-memory web API package.

Exposes create_app() for the hero collection server.
"""
