"""
Tools Package

Parsing utilities shared by the request schemas and the algorithms:
- time_tool: Timestamp parsing and epoch conversion
- coordinates: "lat,lng" free-text parsing

NOTE: coordinates depends on the algorithm records, so it is not imported
eagerly here. Import it directly: `from poolmatch.tools import coordinates`
"""

from poolmatch.tools import time_tool

__all__ = [
    "time_tool",
]
