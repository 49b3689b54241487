import logging
from pathlib import Path
from typing import List, Optional

import typer

from src.detector import DetectorBuilder, DetectorConfig
from src.model import LanguageModelError
from src.profiles import DEFAULT_PROFILE_ROOT

app = typer.Typer()

ProfilesRoot = typer.Option(
    DEFAULT_PROFILE_ROOT,
    "--profiles-root",
    exists=False,
    file_okay=False,
    dir_okay=True,
    help="Directory holding <language>.json profile documents.",
)
Languages = typer.Option(
    [],
    "--language",
    "-l",
    help="Languages to load, in detection order (defaults to every profile under --profiles-root).",
)
Verbose = typer.Option(False, "--verbose", "-v", help="Log debug output while building.")


def _build(profiles_root: Path, languages: List[str], verbose: bool) -> DetectorBuilder:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return DetectorBuilder.from_directory(
            profiles_root,
            languages=languages or None,
            config=DetectorConfig.from_env(),
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except LanguageModelError as exc:
        typer.echo(f"[{exc.code.value}] {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def summary(
    profiles_root: Path = ProfilesRoot,
    languages: List[str] = Languages,
    alpha: Optional[float] = typer.Option(None, "--alpha", help="Smoothing parameter (default 0.5)."),
    verbose: bool = Verbose,
) -> None:
    """
    Build the probability model and print its languages, size and smoothing parameter.
    """
    builder = _build(profiles_root, languages, verbose)
    try:
        detector = builder.create(alpha)
    except LanguageModelError as exc:
        typer.echo(f"[{exc.code.value}] {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Languages ({len(detector.languages)}): {', '.join(detector.languages)}")
    typer.echo(f"N-grams: {len(detector.model)}")
    typer.echo(f"Alpha: {detector.alpha}")


@app.command()
def lookup(
    ngram: str = typer.Argument(..., help="N-gram to look up."),
    profiles_root: Path = ProfilesRoot,
    languages: List[str] = Languages,
    verbose: bool = Verbose,
) -> None:
    """
    Print the per-language probability vector stored for NGRAM.
    """
    builder = _build(profiles_root, languages, verbose)
    model = builder.model
    vector = model.lookup(ngram)
    if vector is None:
        typer.echo(f"N-gram {ngram!r} was not observed in any profile.", err=True)
        raise typer.Exit(code=1)

    for language, probability in zip(model.language_list(), vector):
        typer.echo(f"{language}\t{probability:.6g}")


if __name__ == "__main__":
    app()
