"""Domain services for the table store.

Services implement domain logic that doesn't naturally fit within a single
entity, such as the ordered secondary index tables maintain per column.
"""

from tabledb.domain.services.ordered_index import OrderedIndex

__all__ = [
    "OrderedIndex",
]
