"""Per-user configuration: accounts, client secrets and the current selection."""

from __future__ import annotations

import json
import os
import shutil
import sys
from dataclasses import asdict, dataclass
from pathlib import Path

SYSTEM_CONFIG_DIR_NAME = ".config"
BASE_PATH_DIR_NAME = "gdrive3"
ACCOUNT_CONFIG_NAME = "account.json"
SECRET_CONFIG_NAME = "secret.json"
TOKENS_CONFIG_NAME = "tokens.json"


class ConfigError(Exception):
    """Raised when the configuration cannot be read or written."""


class AccountConfigMissingError(ConfigError):
    """Raised when no account has been selected."""

    def __init__(self) -> None:
        super().__init__(
            "No account has been selected\n"
            "Use `gdrive account list` to show all accounts.\n"
            "Use `gdrive account switch` to select an account."
        )


@dataclass(frozen=True)
class Account:
    name: str


@dataclass(frozen=True)
class AccountConfig:
    current: str


@dataclass(frozen=True)
class Secret:
    client_id: str
    client_secret: str


def _to_json(data: dict) -> str:
    return json.dumps(data, indent=2)


@dataclass(frozen=True)
class AppConfig:
    """Locations of one account's files below the configuration base directory."""

    base_path: Path
    account: Account

    @staticmethod
    def has_current_account() -> bool:
        try:
            base_path = AppConfig.default_base_path()
        except ConfigError:
            return False
        return (base_path / ACCOUNT_CONFIG_NAME).exists()

    @staticmethod
    def load_current_account() -> AppConfig:
        base_path = AppConfig.default_base_path()
        account_config = AppConfig.load_account_config()
        return AppConfig(base_path, Account(account_config.current))

    @staticmethod
    def load_account(account_name: str) -> AppConfig:
        return AppConfig(AppConfig.default_base_path(), Account(account_name))

    @staticmethod
    def init_account(account_name: str) -> AppConfig:
        config = AppConfig(AppConfig.default_base_path(), Account(account_name))
        try:
            config.account_base_path().mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise ConfigError(f"Failed to create config directory: {err}") from err
        return config

    @staticmethod
    def load_account_config() -> AccountConfig:
        path = AppConfig.default_base_path() / ACCOUNT_CONFIG_NAME
        if not path.exists():
            raise AccountConfigMissingError()
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as err:
            raise ConfigError(f"Failed to read account config: {err}") from err
        try:
            current = json.loads(content)["current"]
            if not isinstance(current, str):
                raise TypeError("field `current` must be a string")
        except (ValueError, KeyError, TypeError) as err:
            raise ConfigError(f"Failed to deserialize account config: {err}") from err
        return AccountConfig(current)

    @staticmethod
    def default_base_path() -> Path:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as err:
            raise ConfigError("Home directory not found") from err
        return home / SYSTEM_CONFIG_DIR_NAME / BASE_PATH_DIR_NAME

    def remove_account(self) -> None:
        try:
            shutil.rmtree(self.account_base_path())
        except OSError as err:
            raise ConfigError(f"Failed to remove account directory: {err}") from err

        account_config = AppConfig.load_account_config()
        if self.account.name == account_config.current:
            try:
                self.account_config_path().unlink()
            except OSError as err:
                raise ConfigError(f"Failed to remove account config: {err}") from err

    def save_secret(self, secret: Secret) -> None:
        path = self.secret_path()
        try:
            path.write_text(_to_json(asdict(secret)), encoding="utf-8")
        except OSError as err:
            raise ConfigError(f"Failed to write secret: {err}") from err
        try:
            set_file_permissions(path)
        except OSError as err:
            print(
                f"Warning: Failed to set file permissions on secrets file: {err}",
                file=sys.stderr,
            )

    def load_secret(self) -> Secret:
        try:
            content = self.secret_path().read_text(encoding="utf-8")
        except OSError as err:
            raise ConfigError(f"Failed to read secret: {err}") from err
        try:
            data = json.loads(content)
            client_id = data["client_id"]
            client_secret = data["client_secret"]
            if not isinstance(client_id, str) or not isinstance(client_secret, str):
                raise TypeError("secret fields must be strings")
        except (ValueError, KeyError, TypeError) as err:
            raise ConfigError(f"Failed to deserialize secret: {err}") from err
        return Secret(client_id, client_secret)

    def save_account_config(self) -> None:
        content = _to_json(asdict(AccountConfig(self.account.name)))
        try:
            self.account_config_path().write_text(content, encoding="utf-8")
        except OSError as err:
            raise ConfigError(f"Failed to write account config: {err}") from err

    def account_config_path(self) -> Path:
        return self.base_path / ACCOUNT_CONFIG_NAME

    def account_base_path(self) -> Path:
        return self.base_path / self.account.name

    def secret_path(self) -> Path:
        return self.account_base_path() / SECRET_CONFIG_NAME

    def tokens_path(self) -> Path:
        return self.account_base_path() / TOKENS_CONFIG_NAME


def add_account(account_name: str, secret: Secret, tokens_path: os.PathLike | str) -> AppConfig:
    """Create an account directory holding the secret and a copy of the tokens."""
    config = AppConfig.init_account(account_name)
    config.save_secret(secret)
    try:
        shutil.copy(tokens_path, config.tokens_path())
    except OSError as err:
        raise ConfigError(f"Failed to copy tokens: {err}") from err
    return config


def switch_account(config: AppConfig) -> None:
    """Make the given account the current one."""
    config.save_account_config()


def list_accounts() -> list[str]:
    """Return the sorted names of all accounts that have tokens."""
    base_path = AppConfig.default_base_path()
    try:
        base_path.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise ConfigError(f"Failed to create directory '{base_path}': {err}") from err
    try:
        entries = list(base_path.iterdir())
    except OSError as err:
        raise ConfigError(f"Failed to list files: {err}") from err
    return sorted(
        entry.name
        for entry in entries
        if entry.is_dir() and (entry / TOKENS_CONFIG_NAME).exists()
    )


def set_file_permissions(path: os.PathLike | str) -> None:
    """Restrict a file to its owner on systems with POSIX permissions."""
    if os.name == "posix":
        os.chmod(path, 0o600)