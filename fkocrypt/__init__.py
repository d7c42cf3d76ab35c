"""SHA-1, SHA-2 and SHA-3 digests, bounded string copying and SPA state flags."""

__version__ = "0.1.0"
__all__ = ["sha1", "sha256", "sha3", "sha512", "state", "strutil"]