class HashMapError(Exception):
    """Base exception for errors related to ChainingHashTable operations."""
    pass


class InvalidKeyError(HashMapError):
    """
    Custom exception raised when a key cannot be hashed into a bucket slot.
    Only plain integers are accepted as keys.
    """
    def __init__(self, key):
        self.key = key
        message = f"Invalid key {key!r} of type {type(key).__name__}: keys must be integers"
        super().__init__(message)
