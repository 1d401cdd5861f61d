"""Inbound ports - API contracts for the table store.

Inbound ports define the interfaces that upper layers use to interact with
the domain, such as the secondary index contract the executor relies on.
"""

from tabledb.ports.inbound.index import Index, IndexStats, RangeBound

__all__ = [
    "Index",
    "IndexStats",
    "RangeBound",
]
