from __future__ import annotations

import json
import logging
from importlib.metadata import PackageNotFoundError, version as _dist_version
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import TagCloudConfig, load_optional_config
from .counting import count_file
from .fonts import font_size
from .pipeline import (
    TagCloudError,
    close_file,
    generate_cloud,
    open_input,
    open_output,
    run_pipeline,
)
from .render import DEFAULT_STYLESHEET
from .selection import select_top
from .tokenizer import DEFAULT_SEPARATORS, make_separators
from .word_count import parse_word_count


log = logging.getLogger(__name__)

DEFAULT_TOP = 50


app = typer.Typer(
    help="tagcloud — render the most frequent words of a text file as an HTML tag cloud",
    rich_markup_mode="rich",
    add_completion=False,
)


def _version() -> str:
    try:
        return _dist_version("tagcloud")
    except PackageNotFoundError:
        return "0.1.0"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tagcloud {_version()}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _fail(err: Exception) -> None:
    Console(stderr=True).print(str(err), style="red", markup=False, soft_wrap=True)
    raise typer.Exit(code=1)


def _ctx_config(ctx: typer.Context) -> TagCloudConfig | None:
    if isinstance(getattr(ctx, "obj", None), dict):
        return ctx.obj.get("config")
    return None


def _resolve(
    cfg: TagCloudConfig | None,
    *,
    top: int,
    separators: str,
    stylesheet: str,
) -> tuple[int, str, str]:
    """Replace options left at their defaults with config.toml values."""
    if cfg is None:
        return top, separators, stylesheet

    cfg_top = cfg.get("tagcloud", "top")
    if isinstance(cfg_top, int) and int(top) == DEFAULT_TOP:
        top = int(cfg_top)

    cfg_seps = cfg.get("tagcloud", "separators")
    if isinstance(cfg_seps, str) and cfg_seps and separators == DEFAULT_SEPARATORS:
        separators = cfg_seps

    cfg_css = cfg.get("tagcloud", "stylesheet")
    if isinstance(cfg_css, str) and cfg_css and stylesheet == DEFAULT_STYLESHEET:
        stylesheet = cfg_css

    return top, separators, stylesheet



def _word_count(n: int) -> int:
    wanted = parse_word_count(str(n))
    for w in wanted.warnings:
        log.warning(w)
    return wanted.value


@app.callback()
def _global_options(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Optional config.toml path (defaults to ./config.toml when present)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit",
    ),
):
    _setup_logging(verbose)
    try:
        cfg = load_optional_config(config)
    except (FileNotFoundError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config") from e
    ctx.obj = {"config": cfg}


@app.command()
def generate(
    ctx: typer.Context,
    inp: Path = typer.Option(..., "--in", dir_okay=False, help="Input text file"),
    out: Path = typer.Option(..., "--out", dir_okay=False, help="Output HTML file"),
    top: int = typer.Option(DEFAULT_TOP, "--top", help="Number of words in the cloud (negative counts as 0)"),
    separators: str = typer.Option(
        DEFAULT_SEPARATORS,
        "--separators",
        help="Characters that separate words",
        show_default=False,
    ),
    stylesheet: str = typer.Option(
        DEFAULT_STYLESHEET,
        "--stylesheet",
        help="Stylesheet URL providing the f11..f47 classes",
        show_default=False,
    ),
):
    """Write an HTML tag cloud of the top-N words in a text file."""
    top, separators, stylesheet = _resolve(
        _ctx_config(ctx), top=top, separators=separators, stylesheet=stylesheet
    )
    top = _word_count(top)

    console = Console()
    console.print(Panel("Generating tag cloud…", title="tagcloud", border_style="cyan"))
    try:
        res = run_pipeline(
            inp=inp,
            out=out,
            top=int(top),
            separators=make_separators(separators),
            stylesheet=stylesheet,
        )
    except TagCloudError as e:
        _fail(e)
        return

    console.print(f"Wrote top {res.rendered} of {res.unique_words} words to {res.out}")
    if not res.complete:
        console.print("Input was only partly read; the cloud covers the words read so far.")


@app.command()
def prompt(ctx: typer.Context):
    """Ask for the input file, output file and word count, then write the cloud."""
    _top, separators, stylesheet = _resolve(
        _ctx_config(ctx), top=DEFAULT_TOP, separators=DEFAULT_SEPARATORS, stylesheet=DEFAULT_STYLESHEET
    )

    inp = typer.prompt("Please enter the name of input file")
    try:
        in_fp = open_input(inp)
    except TagCloudError as e:
        _fail(e)
        return

    out_fp = None
    try:
        out = typer.prompt("Please enter name of output file")
        try:
            out_fp = open_output(out)
        except TagCloudError as e:
            _fail(e)
            return

        try:
            raw = typer.prompt("Enter desired number of words", default="", show_default=False)
        except typer.Abort:
            raw = None
        wanted = parse_word_count(raw)
        for w in wanted.warnings:
            log.warning(w)

        _counted, selection = generate_cloud(
            in_fp,
            out_fp,
            top=wanted.value,
            input_name=inp,
            separators=make_separators(separators),
            stylesheet=stylesheet,
        )
    finally:
        close_file(in_fp, "input")
        close_file(out_fp, "output")

    typer.echo(f"Wrote top {len(selection)} words to {out}")


@app.command()
def top(
    ctx: typer.Context,
    inp: Path = typer.Option(..., "--in", exists=True, dir_okay=False, help="Input text file"),
    top: int = typer.Option(DEFAULT_TOP, "--top", help="Number of words to list (negative counts as 0)"),
    separators: str = typer.Option(
        DEFAULT_SEPARATORS,
        "--separators",
        help="Characters that separate words",
        show_default=False,
    ),
    json_output: bool = typer.Option(False, "--json", help="Print JSON to stdout"),
):
    """List the words a cloud would show, with counts and font sizes."""
    n, separators, _css = _resolve(
        _ctx_config(ctx), top=top, separators=separators, stylesheet=DEFAULT_STYLESHEET
    )
    n = _word_count(n)

    with inp.open("r", encoding="utf-8") as fp:
        counted = count_file(fp, make_separators(separators))
    selection = select_top(counted.counts, int(n))

    rows = [
        {"word": w, "count": c, "font_size": font_size(c, selection.min_count, selection.max_count)}
        for w, c in selection
    ]
    if bool(json_output):
        typer.echo(json.dumps(rows, ensure_ascii=False))
        return

    table = Table(title=f"Top {len(rows)} words in {inp}")
    table.add_column("word")
    table.add_column("count", justify="right")
    table.add_column("size", justify="right")
    for r in rows:
        table.add_row(r["word"], str(r["count"]), str(r["font_size"]))
    Console().print(table)
