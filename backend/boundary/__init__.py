"""
Boundary layer for external system integrations.

Handles all interactions with the hosted document store.
Provides adapters and clients for infrastructure dependencies.
"""
