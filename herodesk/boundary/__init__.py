"""
Boundary layer for external system integrations.

Handles all interactions with the hero collection, in memory or over HTTP.
"""
