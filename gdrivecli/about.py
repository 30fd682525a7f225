"""Short description of the tool."""

from __future__ import annotations

import sys

_ABOUT_LINES = (
    "gdrive is a command line application for interacting with Google Drive.",
    "",
    "For the latest information check out the project page.",
    "You will also find link to the community chat and information on how to "
    "support the project.",
)


def about() -> str:
    """Print what the tool is for and return the printed text."""
    text = "\n".join(_ABOUT_LINES) + "\n"
    sys.stdout.write(text)
    return text