class StoreError(Exception):
    """Raised when the expense database cannot be reached or a statement fails."""
