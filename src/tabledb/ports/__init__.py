"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts. Adapters and
domain services implement them with concrete functionality.
"""

from tabledb.ports.inbound import Index, IndexStats, RangeBound

__all__ = [
    "Index",
    "IndexStats",
    "RangeBound",
]
