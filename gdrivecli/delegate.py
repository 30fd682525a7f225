"""Chunked-upload policy: chunk sizes, retry backoff and progress reporting."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

_HUMAN_UNIT = 1024.0
_HUMAN_SUFFIXES = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")


def _human_bytes(size: float) -> str:
    if size <= 0:
        return "0 B"
    base = math.log10(size) / math.log10(_HUMAN_UNIT)
    whole = min(math.floor(base), len(_HUMAN_SUFFIXES) - 1)
    value = f"{_HUMAN_UNIT ** (base - whole):.1f}"
    if value.endswith(".0"):
        value = value[:-2]
    return f"{value} {_HUMAN_SUFFIXES[whole]}"


class ChunkSize(Enum):
    """Upload chunk size in approximate megabytes; APPROX32 is the default."""

    APPROX1 = 1
    APPROX2 = 2
    APPROX4 = 4
    APPROX8 = 8
    APPROX16 = 16
    APPROX32 = 32
    APPROX64 = 64
    APPROX128 = 128
    APPROX256 = 256
    APPROX512 = 512
    APPROX1024 = 1024
    APPROX2048 = 2048
    APPROX4096 = 4096
    APPROX8192 = 8192

    @staticmethod
    def parse(text: str) -> ChunkSize:
        for member in ChunkSize:
            if str(member.value) == text:
                return member
        raise ValueError("Not a valid chunk size, must be a power of 2 between 1 and 8192")

    def in_bytes(self) -> int:
        return self.value * 2**20

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BackoffConfig:
    """Retry limits; sleeps are in seconds."""

    max_retries: int = 100
    min_sleep: float = 1.0
    max_sleep: float = 60.0
    factor: float = 2.0
    jitter: float = 0.3


@dataclass(frozen=True)
class Retry:
    """Decision after a failed request: retry after `delay` seconds, or abort."""

    delay: float | None = None

    @staticmethod
    def abort() -> Retry:
        return Retry(None)

    @staticmethod
    def after(delay: float) -> Retry:
        return Retry(delay)

    @property
    def is_abort(self) -> bool:
        return self.delay is None


class Backoff:
    """Exponential backoff with jitter, bounded by a number of attempts."""

    def __init__(
        self,
        config: BackoffConfig | None = None,
        rng: Callable[[], float] = random.random,
    ) -> None:
        self._config = config or BackoffConfig()
        self._rng = rng
        self.attempts = 0

    def _delay(self, attempt: int) -> float | None:
        cfg = self._config
        if attempt >= cfg.max_retries:
            return None
        try:
            delay = cfg.min_sleep * cfg.factor**attempt
        except OverflowError:
            delay = math.inf
        if cfg.jitter:
            delay *= 1.0 - self._rng() * cfg.jitter
        return max(cfg.min_sleep, min(delay, cfg.max_sleep))

    def retry(self) -> Retry:
        self.attempts += 1
        delay = self._delay(self.attempts)
        return Retry.abort() if delay is None else Retry.after(delay)

    def abort(self) -> Retry:
        return Retry.abort()


@dataclass(frozen=True)
class ContentRange:
    """A chunk of an upload: inclusive byte range (first, last) and the total length."""

    range: tuple[int, int] | None
    total_length: int


@dataclass(frozen=True)
class UploadDelegateConfig:
    chunk_size: ChunkSize = ChunkSize.APPROX32
    backoff_config: BackoffConfig = field(default_factory=BackoffConfig)
    print_chunk_errors: bool = False
    print_chunk_info: bool = False


def should_retry(status: int) -> bool:
    """Server errors and rate limiting are worth another attempt."""
    return 500 <= status <= 599 or status == 429


class UploadDelegate:
    """Callbacks steering a resumable upload."""

    def __init__(
        self,
        config: UploadDelegateConfig | None = None,
        rng: Callable[[], float] = random.random,
    ) -> None:
        self.config = config or UploadDelegateConfig()
        self._backoff = Backoff(self.config.backoff_config, rng)
        self._upload_url: str | None = None
        self._previous_chunk: ContentRange | None = None

    def _print_chunk_info(self, chunk: ContentRange) -> None:
        if not self.config.print_chunk_info or chunk.range is None:
            return
        first, last = chunk.range
        action = "Retrying" if chunk == self._previous_chunk else "Uploading"
        print(
            f"Info: {action} {_human_bytes(last - first + 1)} chunk "
            f"({first}-{last} of {chunk.total_length})"
        )

    def chunk_size(self) -> int:
        return self.config.chunk_size.in_bytes()

    def cancel_chunk_upload(self, chunk: ContentRange) -> bool:
        """Report the chunk about to be sent; never cancels."""
        self._print_chunk_info(chunk)
        self._previous_chunk = chunk
        return False

    def store_upload_url(self, url: str | None) -> None:
        self._upload_url = url

    def upload_url(self) -> str | None:
        return self._upload_url

    def http_error(self, err: object) -> Retry:
        if self.config.print_chunk_errors:
            print(f"Warning: Failed attempt to upload chunk: {err}", file=sys.stderr)
        return self._backoff.retry()

    def http_failure(self, status: int, body: Any = None) -> Retry:
        if not should_retry(status):
            return self._backoff.abort()
        if self.config.print_chunk_errors:
            print(
                "Warning: Failed attempt to upload chunk. "
                f"Status code: {status}, body: {body!r}",
                file=sys.stderr,
            )
        return self._backoff.retry()