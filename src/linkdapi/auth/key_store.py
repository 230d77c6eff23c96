# ABOUTME: API key store for securely keeping LinkdAPI keys in the OS keyring.
# ABOUTME: Tracks stored account names in a JSON file alongside the keyring entries.

import json
from pathlib import Path
from typing import Any

import keyring
from keyring.errors import PasswordDeleteError


class ApiKeyStore:
    """Service for managing LinkdAPI key storage using the OS keyring."""

    SERVICE_NAME = "linkdapi"
    DEFAULT_ACCOUNTS_FILE = Path.home() / ".linkdapi" / "accounts.json"
    MIN_KEY_LENGTH = 8

    def __init__(self, accounts_file: Path | None = None) -> None:
        """Initialize the key store.

        Args:
            accounts_file: Path to JSON file storing account names.
                Defaults to ~/.linkdapi/accounts.json
        """
        self.accounts_file = (
            accounts_file if accounts_file is not None else self.DEFAULT_ACCOUNTS_FILE
        )

    def validate_key_format(self, api_key: str) -> bool:
        """Perform basic validation of an API key: non-blank and long enough."""
        if not api_key or not api_key.strip():
            return False
        return len(api_key.strip()) >= self.MIN_KEY_LENGTH

    def store_key(self, api_key: str, account: str = "default") -> None:
        """Store an API key in the OS keyring.

        Args:
            api_key: The LinkdAPI key to store.
            account: Name to identify this key. Defaults to "default".
        """
        keyring.set_password(self.SERVICE_NAME, account, api_key.strip())
        self._add_account_to_list(account)

    def get_key(self, account: str = "default") -> str | None:
        """Retrieve an API key from the OS keyring.

        Returns:
            The stored key, or None if the account has no key.
        """
        return keyring.get_password(self.SERVICE_NAME, account)

    def delete_key(self, account: str = "default") -> bool:
        """Delete an API key from the OS keyring.

        Returns:
            True if a key was deleted, False if none was stored.
        """
        try:
            keyring.delete_password(self.SERVICE_NAME, account)
        except PasswordDeleteError:
            self._remove_account_from_list(account)
            return False
        self._remove_account_from_list(account)
        return True

    def list_accounts(self) -> list[str]:
        """List all stored account names."""
        return self._load_accounts()

    def _load_accounts(self) -> list[str]:
        """Load account names from the accounts file.

        Returns:
            List of account names, or empty list if file doesn't exist or is empty/invalid.
        """
        if not self.accounts_file.exists():
            return []

        try:
            content = self.accounts_file.read_text().strip()
            if not content:
                return []
            data: Any = json.loads(content)
            if not isinstance(data, dict):
                return []
            accounts = data.get("accounts", [])
            if isinstance(accounts, list):
                return [str(name) for name in accounts]
            return []
        except (json.JSONDecodeError, OSError):
            return []

    def _save_accounts(self, accounts: list[str]) -> None:
        self.accounts_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.accounts_file, "w") as f:
            json.dump({"accounts": accounts}, f, indent=2)

    def _add_account_to_list(self, account: str) -> None:
        accounts = self._load_accounts()
        if account not in accounts:
            accounts.append(account)
            self._save_accounts(accounts)

    def _remove_account_from_list(self, account: str) -> None:
        accounts = self._load_accounts()
        if account in accounts:
            accounts.remove(account)
            self._save_accounts(accounts)
