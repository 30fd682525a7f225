# gdrivecli

The local side of a Google Drive command line client. It handles:

- account configuration,
- moving accounts between machines as tar archives,
- describing local files and folder trees before an upload,
- the chunking and retry rules for resumable uploads,
- printing aligned tables.

It uses only the standard library and needs Python 3.10 or later.

## Where configuration lives

All configuration is stored under `~/.config/gdrive3`:

- Each account has its own directory there, holding `secret.json` and `tokens.json`.
- `account.json` records which account is current, as `{"current": "<name>"}`.

A directory counts as an account only if it contains `tokens.json`.

## Account commands

The functions in `gdrivecli.account` print what they do and also return it:

```python
from gdrivecli import account

account.list_accounts()   # prints each account name on its own line and returns the sorted list
account.current()         # prints the current account name and returns it
account.switch("someone@example.com")
account.export("someone@example.com")
# writes gdrive_export-someone_example_com.tar in the working directory
# and returns its path
account.import_account("gdrive_export-someone_example_com.tar")
account.remove("someone@example.com")
```

`export` builds the archive name by replacing every character that is not alphanumeric with `_`. On POSIX systems the archive gets mode 0600. It refuses to overwrite an archive that already exists.

`import_account` reads the single directory name stored in the archive and unpacks it into the configuration directory. If no account is current yet, it switches to the imported account.

Errors are raised as exceptions:

- `NoAccountsError` when no accounts are configured. Only `current` and `list_accounts` raise it.
- `AccountNotFoundError` when the named account does not exist.
- `AccountExistsError` when an import would overwrite an existing account.

All three derive from `AccountError`. Configuration problems raise `gdrivecli.app_config.ConfigError`. Archive problems raise `gdrivecli.account_archive.ArchiveError`.

## Working with the configuration directly

```python
from gdrivecli.app_config import AppConfig, Secret, add_account, switch_account

cfg = AppConfig.init_account("someone@example.com")   # creates the account directory
cfg.save_secret(Secret(client_id="example-client-id", client_secret="secret"))
cfg.load_secret()
cfg.tokens_path()

cfg = add_account("someone@example.com", Secret("example-client-id", "secret"), "tokens.json")
switch_account(cfg)
AppConfig.load_current_account().account.name
```

On POSIX systems `save_secret` gives `secret.json` mode 0600. `add_account` copies an existing tokens file into the account directory.

If `account.json` is missing, `AppConfig.load_account_config()` and `load_current_account()` raise `AccountConfigMissingError`.

`gdrivecli.account_archive` provides the archive functions that the account commands use: `create`, `unpack` and `get_account_name`. `unpack` skips archive entries with absolute paths or `..` components.

## Upload helpers

### Chunk sizes and retries

`gdrivecli.delegate` controls chunk sizes and decides whether a failed request should be retried:

```python
from gdrivecli.delegate import ChunkSize, UploadDelegate, UploadDelegateConfig, should_retry

ChunkSize.parse("64").in_bytes()   # 67108864
should_retry(503)                  # True
should_retry(429)                  # True
should_retry(404)                  # False

delegate = UploadDelegate(UploadDelegateConfig(chunk_size=ChunkSize.APPROX8))
delegate.chunk_size()              # 8388608
delegate.http_failure(503).delay   # seconds to wait before the next attempt
delegate.http_failure(404).is_abort  # True
```

- **Chunk sizes** are given in MiB and must be a power of two from 1 to 8192. The default is 32.
- **Backoff** is exponential with jitter. By default it allows up to 100 attempts, with waits between 1 and 60 seconds.
- **Chunk reporting**: with `print_chunk_info=True`, `cancel_chunk_upload` prints which chunk is being uploaded or retried.

### Files, folders and document types

- `gdrivecli.drive_file` maps local file extensions to Drive document types (`DocType`). It lists the formats each type can be exported to and gives the MIME type for each export format. `is_directory`, `is_binary` and `is_shortcut` inspect a Drive file resource given as a mapping, such as `{"mimeType": ...}`.
- `gdrivecli.file_info.FileInfo.from_file` describes an open local file: its name, MIME type, parents and size. If no MIME type is given, it guesses one from the file name.
- `gdrivecli.file_tree.FileTree.from_path(path, ids)` walks a local directory. It takes one id from the `ids` iterator for every folder and file. `folders()` returns the folders shallowest first. `info()` counts files and folders and totals file sizes.
- `gdrivecli.file_helper.open_file(path)` opens a file for reading. With no path, it copies standard input into a temporary file first. `EmptyFile` is a stream with no content.
- `gdrivecli.md5_writer.Md5Writer` wraps a binary stream and computes the MD5 hex digest of what is written through it.
- `gdrivecli.path_helper.sanitize_path` resolves `.` and `..` lexically, so that a relative path cannot climb above its start.

## Tables

```python
import sys
from gdrivecli.table import Table, DisplayConfig, write

write(sys.stdout, Table(header=["Id", "Name"], values=[["1", "notes"]]), DisplayConfig())
```

Each column is as wide as its widest cell plus three spaces. `DisplayConfig(skip_header=True)` leaves out the header row. A different `separator` joins cells with that text instead of aligning them.

`gdrivecli.about.about()` prints a short description of the tool.

## What this package does not do

This package never talks to Google Drive:

- It has no OAuth sign-in. An account's `tokens.json` must come from elsewhere, or from an archive made by `account.export`.
- It has no file listing, uploading, downloading or sharing.
- It installs no command; everything is used from Python.