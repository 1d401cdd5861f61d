"""Domain layer: values, rows, tables, indexes and the error families."""
