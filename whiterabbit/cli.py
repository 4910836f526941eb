from __future__ import annotations

import json
import os

import requests
import typer

from whiterabbit.config import load_settings
from whiterabbit.corpus.loader import load_corpus, preview
from whiterabbit.logging_utils import configure_logging
from whiterabbit.textgen.bigram import BigramWordSynthesizer
from whiterabbit.textgen.engine import TextEngine
from whiterabbit.textgen.markov import ChainCache

app = typer.Typer(help="White Rabbit vLLM emulator")


@app.command()
def serve(
    host: str = "",
    port: int = 0,
    config: str = typer.Option("", help="Path to a yaml config file"),
    model: str = "",
    log_level: str = "",
) -> None:
    """Run the HTTP server."""
    if config:
        os.environ["WR_CONFIG"] = config
    if model:
        os.environ["WR_MODEL"] = model
    if log_level:
        os.environ["WR_LOG_LEVEL"] = log_level
    settings = load_settings(config or None)
    import uvicorn

    uvicorn.run("whiterabbit.server:app", host=host or settings.host, port=port or settings.port)


@app.command()
def generate(
    prompt: str = typer.Argument(..., help="Prompt to continue"),
    max_tokens: int = typer.Option(0, help="Token budget, 0 for the default"),
    strict: bool = typer.Option(False, help="Keep generating past punctuation until the budget is met"),
    paragraph: bool = typer.Option(False, help="Use invented words instead of the corpus chain"),
    config: str = typer.Option("", help="Path to a yaml config file"),
) -> None:
    """Generate one completion locally, without the server."""
    settings = load_settings(config or None)
    configure_logging(settings.log_level, settings.log_prefix)
    engine = TextEngine(
        ChainCache(lambda: load_corpus(settings)),
        BigramWordSynthesizer(),
        generator="paragraph" if paragraph else settings.generator,
    )
    result = engine.complete(prompt, max_tokens or None, strict)
    typer.echo(result.text)
    typer.echo(f"finish_reason: {'length' if result.hit_max_length else 'stop'}", err=True)


@app.command()
def corpus(config: str = typer.Option("", help="Path to a yaml config file"), limit: int = 3) -> None:
    """Show where the corpus comes from and a few sample texts."""
    settings = load_settings(config or None)
    configure_logging(settings.log_level, settings.log_prefix)
    texts = load_corpus(settings)
    source = settings.hf_dataset or "default corpus"
    typer.echo(f"source: {source}")
    typer.echo(f"texts: {len(texts)}")
    for i, text in enumerate(preview(texts, limit), start=1):
        typer.echo(f"{i}. {text}")


@app.command()
def status(url: str = "http://127.0.0.1:8000") -> None:
    """Check the health and version of a running server."""
    base = url.rstrip("/")
    health = requests.get(base + "/health", timeout=10)
    health.raise_for_status()
    version = requests.get(base + "/version", timeout=10)
    version.raise_for_status()
    typer.echo(json.dumps({"health": health.json(), "version": version.json()}, indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
