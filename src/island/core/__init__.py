"""Core layer — Optional, nominal types, timers and type aliases.

This layer depends only on stdlib, pydantic and :mod:`island.errors`.
It must never import from config.
"""
