"""Pure domain layer: sale entities, entry validation and calendar helpers."""
