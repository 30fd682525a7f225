"""Account configuration, account archives, upload policy and local file helpers for a Google Drive client."""

__version__ = "3.9.1"