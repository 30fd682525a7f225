"""Account commands: list, show, switch, remove, export and import accounts."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from gdrivecli import account_archive
from gdrivecli import app_config
from gdrivecli.app_config import AppConfig


class AccountError(Exception):
    """Raised when an account command cannot be carried out."""


class NoAccountsError(AccountError):
    def __init__(self) -> None:
        super().__init__("No accounts found\nUse `gdrive account add` to add an account.")


class AccountNotFoundError(AccountError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Account '{name}' not found")


class AccountExistsError(AccountError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Account '{name}' already exists")


def _existing_accounts() -> list[str]:
    accounts = app_config.list_accounts()
    if not accounts:
        raise NoAccountsError()
    return accounts


def _require_account(account_name: str) -> None:
    if account_name not in app_config.list_accounts():
        raise AccountNotFoundError(account_name)


def _normalize_name(account_name: str) -> str:
    return "".join(c if c.isalnum() else "_" for c in account_name)


def current() -> str:
    """Print and return the name of the current account."""
    _existing_accounts()
    name = AppConfig.load_current_account().account.name
    print(name)
    return name


def list_accounts() -> list[str]:
    """Print and return the names of all accounts."""
    accounts = _existing_accounts()
    for account in accounts:
        print(account)
    return accounts


def export(account_name: str) -> Path:
    """Pack an account into a tar archive in the working directory."""
    _require_account(account_name)
    app_cfg = AppConfig.init_account(account_name)

    archive_name = f"gdrive_export-{_normalize_name(account_name)}.tar"
    archive_path = Path(archive_name)
    account_archive.create(app_cfg.account_base_path(), archive_path)

    try:
        app_config.set_file_permissions(archive_path)
    except OSError as err:
        print(f"Warning: Failed to set permissions on archive: {err}", file=sys.stderr)

    print(f"Exported account '{account_name}' to {archive_name}")
    return archive_path


def import_account(archive_path: os.PathLike | str) -> str:
    """Unpack an exported account; select it if no account is selected yet."""
    account_name = account_archive.get_account_name(archive_path)
    if account_name in app_config.list_accounts():
        raise AccountExistsError(account_name)

    account_archive.unpack(archive_path, AppConfig.default_base_path())
    print(f"Imported account '{account_name}'")

    if not AppConfig.has_current_account():
        app_cfg = AppConfig.load_account(account_name)
        print(f"Switched to account '{account_name}'")
        app_config.switch_account(app_cfg)

    return account_name


def remove(account_name: str) -> None:
    """Delete an account's stored configuration."""
    _require_account(account_name)
    AppConfig.init_account(account_name).remove_account()
    print(f"Removed account '{account_name}'")


def switch(account_name: str) -> None:
    """Make an existing account the current one."""
    _require_account(account_name)
    app_config.switch_account(AppConfig.init_account(account_name))
    print(f"Switched to account '{account_name}'")