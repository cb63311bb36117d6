"""Domain availability lookup orchestration.

The flow is a single linear pipeline: normalize the raw name/TLD lists,
expand them into per-TLD candidate domains, send each TLD's candidates to
the registrar in fixed-size batches (one request at a time, with a fixed
pause between batches) and fold every reported result into an
`AvailabilityIndex`. Printing is left to the CLI through `LookupHooks`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence, TypeVar

from core.domain.models import AvailabilityIndex, LookupRequest, LookupResult
from core.errors import InputError, RegistrarError
from core.interfaces.checker import AvailabilityChecker

T = TypeVar("T")


@dataclass
class LookupHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    tld_start: Callable[[str, int], None] | None = None
    result: Callable[[str, LookupResult], None] | None = None
    batch_done: Callable[[str, int, int], None] | None = None
    batch_failed: Callable[[str, RegistrarError], None] | None = None


def _split_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [token.strip() for token in raw.split(",")]


def parse_names(raw: str | None) -> list[str]:
    """Normalize a comma-separated name list.

    Tokens are trimmed and lowercased; empty tokens and duplicates are
    dropped, first-seen order is kept.
    """

    if raw is None:
        raise InputError("Missing names. Example: names-lookup apple,banana .ai,.com")
    names = list(dict.fromkeys(token.lower() for token in _split_csv(raw) if token))
    if not names:
        raise InputError("Could not parse any names. Use a comma-separated list like name1,name2")
    return names


def normalize_tld(token: str) -> str:
    return token if token.startswith(".") else f".{token}"


def parse_tlds(raw: str | None) -> list[str]:
    """Normalize a comma-separated TLD list so every entry starts with a dot."""

    tlds = list(dict.fromkeys(normalize_tld(token) for token in _split_csv(raw) if token))
    if not tlds:
        raise InputError("Could not parse any TLDs. Use a comma-separated list like .ai,.com")
    return tlds


def build_request(
    raw_names: str | None,
    raw_tlds: str | None,
    *,
    batch_size: int,
    delay_ms: int,
) -> LookupRequest:
    return LookupRequest(
        names=parse_names(raw_names),
        tlds=parse_tlds(raw_tlds),
        batch_size=batch_size,
        delay_ms=delay_ms,
    )


def build_candidates(names: Sequence[str], tlds: Sequence[str]) -> dict[str, list[str]]:
    """Cartesian product of names x TLDs, grouped by TLD in input order."""

    return {tld: [f"{name}{tld}" for name in names] for tld in tlds}


def iter_batches(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive chunks of at most `size` items."""

    if size < 1:
        raise ValueError("batch size must be >= 1")
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


def run_lookup(
    request: LookupRequest,
    checker: AvailabilityChecker,
    *,
    hooks: LookupHooks | None = None,
    sleep: Callable[[float], None] | None = None,
) -> AvailabilityIndex:
    """Check every candidate domain and return the availability index.

    A `RegistrarError` for one batch is reported through
    `hooks.batch_failed` and the batch counts as zero results; the loop
    always runs to completion.
    """

    hooks = hooks or LookupHooks()
    sleep = sleep or time.sleep
    delay_seconds = request.delay_ms / 1000

    index = AvailabilityIndex.for_tlds(request.tlds)
    candidates = build_candidates(request.names, request.tlds)

    for tld, domains in candidates.items():
        if hooks.tld_start:
            hooks.tld_start(tld, len(domains))

        processed = 0
        for batch in iter_batches(domains, request.batch_size):
            try:
                results = checker.check(batch)
            except RegistrarError as exc:
                results = []
                if hooks.batch_failed:
                    hooks.batch_failed(tld, exc)

            for result in results:
                index.record(tld, result)
                if hooks.result:
                    hooks.result(tld, result)

            processed += len(batch)
            if hooks.batch_done:
                hooks.batch_done(tld, processed, len(domains))

            if processed < len(domains):
                sleep(delay_seconds)

    return index
