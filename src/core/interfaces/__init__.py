"""Core interfaces.

Protocols implemented by concrete adapters, so the naming layer depends on
a contract instead of a specific base adapter.
"""
