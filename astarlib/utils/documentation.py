def internal_only(obj):
    """Mark an object as an implementation detail, not part of the public API."""
    obj.__internal_only__ = True
    return obj


internal_only(internal_only)
