import hashlib


def normalize(text: str) -> str:
    return text.strip()


def fingerprint(text: str) -> str:
    """SHA-256 hex digest of the trimmed text."""
    return hashlib.sha256(normalize(text).encode("utf-8")).hexdigest()
