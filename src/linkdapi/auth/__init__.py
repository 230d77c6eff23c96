# ABOUTME: Auth package for LinkdAPI credential management.
# ABOUTME: Provides ApiKeyStore for secure API key storage using the OS keyring.

from linkdapi.auth.key_store import ApiKeyStore

__all__ = ["ApiKeyStore"]
