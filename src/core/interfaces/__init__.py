"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- The fan-out service depends on the abstraction, not on httpx.
"""
