from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, AbstractSet, Callable

from .counting import CountResult, count_file
from .render import DEFAULT_STYLESHEET, write_page
from .selection import Selection, select_top
from .tokenizer import make_separators


log = logging.getLogger(__name__)


class TagCloudError(Exception):
    """Base class for errors that stop a tag-cloud run."""


class InputUnavailableError(TagCloudError):
    pass


class OutputUnavailableError(TagCloudError):
    pass


@dataclass(frozen=True)
class PipelineResult:
    out: Path
    rendered: int
    requested: int
    unique_words: int
    complete: bool


Opener = Callable[..., IO[str]]


def open_input(path: Path | str, *, encoding: str = "utf-8", open_fn: Opener = open) -> IO[str]:
    try:
        return open_fn(path, "r", encoding=encoding)
    except OSError as e:
        raise InputUnavailableError(f"Error trying to find input file: {path}") from e


def open_output(path: Path | str, *, open_fn: Opener = open) -> IO[str]:
    try:
        return open_fn(path, "w", encoding="utf-8")
    except OSError as e:
        raise OutputUnavailableError(f"Error opening writing file: {path}") from e


def close_file(fp: IO[str] | None, what: str = "") -> None:
    """Close `fp`, logging (not raising) a failure."""
    if fp is None:
        return
    try:
        fp.close()
    except OSError as e:
        log.error("Error closing %s file: %s", what or "a", e)


def generate_cloud(
    in_fp: IO[str],
    out_fp: IO[str],
    *,
    top: int,
    input_name: str,
    separators: AbstractSet[str] | None = None,
    stylesheet: str = DEFAULT_STYLESHEET,
) -> tuple[CountResult, Selection]:
    """Count words from `in_fp` and write the top-`top` page to `out_fp`.

    Neither stream is closed here.
    """
    n = int(top)
    if n < 0:
        raise ValueError("top must be >= 0")
    seps = make_separators() if separators is None else separators

    counted = count_file(in_fp, seps)
    selection = select_top(counted.counts, n)
    log.debug(
        "Selected %d of %d words (counts %d..%d)",
        len(selection),
        len(counted.counts),
        selection.min_count,
        selection.max_count,
    )
    write_page(out_fp, selection, input_name, stylesheet=stylesheet)
    return counted, selection


def run_pipeline(
    *,
    inp: Path | str,
    out: Path | str,
    top: int,
    separators: AbstractSet[str] | None = None,
    stylesheet: str = DEFAULT_STYLESHEET,
    input_name: str | None = None,
    encoding: str = "utf-8",
    # Dependency injection point for tests.
    open_fn: Opener = open,
) -> PipelineResult:
    """Open `inp` then `out`, write the tag cloud, and close both once.

    If either file cannot be opened nothing is counted.
    """
    if int(top) < 0:
        raise ValueError("top must be >= 0")
    name = str(inp) if input_name is None else str(input_name)

    in_fp = open_input(inp, encoding=encoding, open_fn=open_fn)
    out_fp: IO[str] | None = None
    try:
        out_fp = open_output(out, open_fn=open_fn)
        counted, selection = generate_cloud(
            in_fp,
            out_fp,
            top=int(top),
            input_name=name,
            separators=separators,
            stylesheet=stylesheet,
        )
    finally:
        close_file(in_fp, "input")
        close_file(out_fp, "output")

    return PipelineResult(
        out=Path(out),
        rendered=len(selection),
        requested=int(top),
        unique_words=len(counted.counts),
        complete=counted.complete,
    )
