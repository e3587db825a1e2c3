"""Command line entry-point for debate response scoring."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import Optional, TextIO

import click

from .analysis import ResponseText
from .exceptions import DebateScorerError
from .pipeline import DebateResponseEngine
from .scoring import load_rubric
from .utils.config import ConfigManager
from .utils.logging import setup_logging

logger = logging.getLogger("debate_scorer.cli")


def _read_response(input: TextIO, language: Optional[str]) -> ResponseText:
    text = input.read()
    if not text.strip():
        raise click.ClickException("No response text supplied")
    return ResponseText(text=text, language=language)


def _build_engine(config_path: Optional[Path], rubric_path: Optional[Path],
                  seed: Optional[int]) -> DebateResponseEngine:
    config = ConfigManager(config_path)
    rubric = load_rubric(rubric_path, strict=config.get("scoring.strict_rubric", False)) if rubric_path else None
    random_source = random.Random(seed) if seed is not None else None
    return DebateResponseEngine(rubric=rubric, config=config, random_source=random_source)


def _write_json(data: dict, output: TextIO) -> None:
    json.dump(data, output, indent=2)
    output.write("\n")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(verbose: bool) -> None:
    """Analyze and score argumentative debate responses."""
    setup_logging(verbose=verbose)


@main.command()
@click.option("--input", "-i", type=click.File("r"), default="-", help="Response file path (defaults to stdin)")
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output destination (defaults to stdout)")
@click.option("--language", "-l", default=None, help="Language tag of the response (informational)")
@click.option("--config", "config_path", type=click.Path(exists=True, path_type=Path), help="YAML settings file")
def analyze(input: TextIO, output: TextIO, language: Optional[str], config_path: Optional[Path]) -> None:
    """Print the linguistic profile of a response as JSON."""
    response = _read_response(input, language)

    try:
        engine = _build_engine(config_path, None, None)
        profile = engine.analyze(response)
    except DebateScorerError as e:
        raise click.ClickException(str(e)) from e

    _write_json(profile.model_dump(mode="json"), output)


@main.command()
@click.option("--input", "-i", type=click.File("r"), default="-", help="Response file path (defaults to stdin)")
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output destination (defaults to stdout)")
@click.option("--language", "-l", default=None, help="Language tag of the response (informational)")
@click.option("--rubric", "rubric_path", type=click.Path(exists=True, path_type=Path), help="Alternative rubric YAML")
@click.option("--config", "config_path", type=click.Path(exists=True, path_type=Path), help="YAML settings file")
@click.option("--seed", type=int, default=None, help="Seed for reproducible feedback phrasing")
@click.option("--detailed", is_flag=True, help="Include detailed feedback for every category")
@click.option("--no-profile", is_flag=True, help="Omit the linguistic profile from the output")
def score(
    input: TextIO,
    output: TextIO,
    language: Optional[str],
    rubric_path: Optional[Path],
    config_path: Optional[Path],
    seed: Optional[int],
    detailed: bool,
    no_profile: bool,
) -> None:
    """Score a response and print scores and feedback as JSON."""
    response = _read_response(input, language)

    try:
        engine = _build_engine(config_path, rubric_path, seed)
        result = engine.evaluate(response, detailed=detailed or None)
    except DebateScorerError as e:
        raise click.ClickException(str(e)) from e

    logger.info(f"Overall score {result.score.overall}")
    _write_json(result.to_response(include_profile=not no_profile), output)


@main.command("validate-rubric")
@click.argument("rubric_path", type=click.Path(exists=True, path_type=Path))
@click.option("--strict", is_flag=True, help="Treat unsupported indicator kinds as errors")
def validate_rubric(rubric_path: Path, strict: bool) -> None:
    """Validate a rubric YAML file."""
    try:
        rubric = load_rubric(rubric_path, strict=strict)
    except DebateScorerError as e:
        raise click.ClickException(str(e)) from e

    unsupported = rubric.unsupported_indicators()
    click.echo(f"Rubric {rubric.version}: {len(rubric.categories)} categories, valid")
    for category, subcriterion, indicator in unsupported:
        click.echo(f"  warning: {category}.{subcriterion} uses unsupported kind '{indicator.kind}'")


if __name__ == "__main__":  # pragma: no cover
    main()
