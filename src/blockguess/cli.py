"""Command line interface for blockguess."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from blockguess.config import AppConfig
from blockguess.errors import BlockGuessError
from blockguess.hashing.normalizer import normalize as normalize_hash
from blockguess.hashing.tokenizer import tokenize as tokenize_hash
from blockguess.matching.distance import classify as classify_distance
from blockguess.matching.matcher import find_matches
from blockguess.matching.offset import derive_offset
from blockguess.models import MatchPolicy, MatchResult, TokenizeMode
from blockguess.pipeline import Verifier
from blockguess.web.app import app as web_app


console = Console()
app = typer.Typer(help="blockguess - off-chain hash matching for the block guessing game")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _parse_thresholds(raw: str) -> List[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise typer.BadParameter(f"Thresholds must be integers: {raw}") from exc


def _print_matches(result: MatchResult) -> None:
    if not result:
        console.print("[yellow]No matching tokens found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Token")
    table.add_column("Guess index")
    table.add_column("Fetched index")
    for match in result.matches:
        table.add_row(match.token, str(match.index_a), str(match.index_b))
    console.print(table)
    console.print(f"Found {result.count} matching token(s).")


@app.command()
def normalize(value: str = typer.Argument(..., help="Hex hash, with or without 0x")) -> None:
    """Print the canonical form of a 32-byte hash."""
    try:
        console.print(normalize_hash(value))
    except BlockGuessError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def tokenize(
    value: str = typer.Argument(..., help="Hex hash to split"),
    size: int = typer.Option(AppConfig().token_size, "--size", "-s", help="Token size"),
    mode: TokenizeMode = typer.Option(AppConfig().tokenize_mode, help="Tokenization mode"),
) -> None:
    """Split a hash into tokens."""
    try:
        tokens = tokenize_hash(normalize_hash(value), size, mode)
    except BlockGuessError as exc:
        raise typer.BadParameter(str(exc)) from exc

    for index, token in enumerate(tokens):
        console.print(f"{index:>3} {token}")


@app.command()
def match(
    guess: str = typer.Argument(..., help="Guessed hash"),
    fetched: str = typer.Argument(..., help="Fetched block hash"),
    size: int = typer.Option(AppConfig().token_size, "--size", "-s", help="Token size"),
    mode: TokenizeMode = typer.Option(AppConfig().tokenize_mode, help="Tokenization mode"),
    policy: MatchPolicy = typer.Option(AppConfig().match_policy, help="Comparison policy"),
    strict: bool = typer.Option(False, help="Require equal lengths in positional mode"),
) -> None:
    """Find tokens shared by two hashes."""
    try:
        left = tokenize_hash(normalize_hash(guess), size, mode)
        right = tokenize_hash(normalize_hash(fetched), size, mode)
        result = find_matches(left, right, policy, strict=strict)
    except BlockGuessError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _print_matches(result)


@app.command()
def classify(
    distance: int = typer.Argument(..., help="Block distance"),
    thresholds: Optional[str] = typer.Option(None, help="Comma-separated t1,t2,t3"),
    complex_mode: bool = typer.Option(False, "--complex", help="Use complex-mode defaults"),
) -> None:
    """Classify a block distance into a risk bucket."""
    limits = (
        _parse_thresholds(thresholds)
        if thresholds is not None
        else list(AppConfig().thresholds_for(complex_mode))
    )
    try:
        result = classify_distance(distance, limits)
    except BlockGuessError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(
        f"Distance {result.distance}: [bold]{result.bucket.value}[/bold] "
        f"(level {result.level}, {result.color})"
    )


@app.command()
def offset(
    seed: str = typer.Argument(..., help="Seed block hash"),
    target: int = typer.Argument(..., help="Target block number"),
    modulus: int = typer.Option(AppConfig().complex_modulus, help="Offset modulus"),
) -> None:
    """Derive the complex-mode secondary block."""
    try:
        result = derive_offset(seed, target, modulus)
    except BlockGuessError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(
        f"Byte 0x{result.byte_hex} ({result.byte_value}) % {result.modulus} = {result.offset}; "
        f"derived block [bold]{result.derived_block}[/bold]"
    )


@app.command()
def verify(
    guess: str = typer.Argument(..., help="Guessed hash"),
    fetched: str = typer.Argument(..., help="Hash of the target block"),
    target: int = typer.Option(..., "--target", help="Target block number"),
    current: int = typer.Option(..., "--current", help="Current chain height"),
    complex_mode: bool = typer.Option(False, "--complex", help="Complex verification mode"),
    derived_hash: Optional[str] = typer.Option(
        None, "--derived-hash", help="Hash of the derived block, used when complex mode retries"
    ),
    size: int = typer.Option(AppConfig().token_size, "--size", "-s", help="Token size"),
    mode: TokenizeMode = typer.Option(AppConfig().tokenize_mode, help="Tokenization mode"),
    policy: MatchPolicy = typer.Option(AppConfig().match_policy, help="Comparison policy"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Run the full off-chain verification for one guess."""
    _setup_logging(verbose)
    config = AppConfig(token_size=size, tokenize_mode=mode, match_policy=policy)
    fetcher = (lambda _block: derived_hash) if derived_hash is not None else None
    verifier = Verifier(config, fetch_block_hash=fetcher)

    try:
        result = verifier.verify(guess, fetched, target, current, complex_mode=complex_mode)
    except BlockGuessError as exc:
        raise typer.BadParameter(str(exc)) from exc

    classification = result.classification
    console.print(
        f"Block distance: {classification.distance} "
        f"([bold]{classification.bucket.value}[/bold])"
    )
    if result.offset is not None:
        console.print(
            f"Complex calculation: byte 0x{result.offset.byte_hex}, "
            f"offset {result.offset.offset}, derived block {result.offset.derived_block}"
        )
    if result.pending_refetch:
        console.print(
            f"[yellow]Fetch block {result.offset.derived_block} and pass its hash "
            "with --derived-hash to retry.[/yellow]"
        )
        return

    console.print(f"Compared against block {result.block_number}")
    _print_matches(result.matches)
    if result.matched:
        console.print(f"Encoded match: {result.encoded_match}")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the HTTP API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting blockguess API on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
