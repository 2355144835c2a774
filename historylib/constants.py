"""Constants and configuration for historylib."""

class HistoryConstants:
    """Central configuration constants for histories."""
    
    # Capacity
    MIN_CAPACITY = 1
    
    # Error messages
    INVALID_CAPACITY_MESSAGE = "capacity <= 0"
    CAPACITY_TYPE_MESSAGE = "capacity must be an int, not {}"
    CANNOT_UNDO_MESSAGE = "cannot undo"
    CANNOT_REDO_MESSAGE = "cannot redo"
    EMPTY_HISTORY_MESSAGE = "history has no current element"
    CONCURRENT_MODIFICATION_MESSAGE = "history changed during iteration"
