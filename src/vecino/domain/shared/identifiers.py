import secrets


def new_id() -> str:
    """Return a fresh 24-hex identifier, the shape of a MongoDB ObjectId."""
    return secrets.token_hex(12)
