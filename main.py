import json
import logging
from pathlib import Path
from typing import Optional

import typer

from experiments.benchmark import BenchmarkReport, run_benchmark
from src.analysis import DEFAULT_LONGEST_WORDS, DEFAULT_TOP_WORDS, AnalysisConfig, AnalysisEngine, AnalysisResult
from src.corpus import DEFAULT_SAMPLE_SIZE, generate_sample_text, load_text, write_text
from src.pipelines import analyze_sharded

app = typer.Typer()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_config(top: int, longest: int) -> AnalysisConfig:
    config = AnalysisConfig(top_words=top, longest_words=longest)
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return config


def _echo_result(result: AnalysisResult, preview: Optional[int] = None) -> None:
    top_words = result.top_words if preview is None else result.top_words[:preview]
    longest_words = result.longest_words if preview is None else result.longest_words[:preview]
    typer.echo(f"  Unique words: {result.unique_words}")
    typer.echo(f"  Total chars: {result.total_alphabetic_chars}")
    typer.echo("  Top words: " + ", ".join(f"{word} ({count})" for word, count in top_words))
    typer.echo("  Longest words: " + ", ".join(longest_words))


@app.command()
def analyze(
    path: Optional[Path] = typer.Argument(
        None,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Text file to analyze.",
    ),
    sample: Optional[int] = typer.Option(
        None,
        "--sample",
        help="Analyze a generated sample of this many words instead of a file.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for random sample generation."),
    top: int = typer.Option(DEFAULT_TOP_WORDS, "--top", help="How many frequent words to report."),
    longest: int = typer.Option(DEFAULT_LONGEST_WORDS, "--longest", help="How many long words to report."),
    shards: int = typer.Option(1, "--shards", help="Split counting across this many text shards."),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        help="Processes used for sharded counting (defaults to in-process).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """
    Count letters, frequent words and longest words of a file or a generated sample.
    """
    _configure_logging(verbose)
    if (path is None) == (sample is None):
        raise typer.BadParameter("Provide exactly one of PATH or --sample.")

    config = _build_config(top, longest)
    try:
        text = load_text(path) if path is not None else generate_sample_text(sample or 0, seed=seed)
        if shards != 1 or workers is not None:
            result = analyze_sharded(text, shards, workers=workers, config=config, progress=not as_json)
        else:
            result = AnalysisEngine(config).analyze(text)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    source = str(path) if path is not None else f"sample of {sample} words"
    typer.echo(f"[analyze] {source} ({len(text)} characters)")
    _echo_result(result)


@app.command("sample")
def sample_text(
    size: int = typer.Argument(DEFAULT_SAMPLE_SIZE, help="Number of words to generate."),
    output: Path = typer.Option(..., "--output", "-o", dir_okay=False, help="File to write."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Sample words randomly with this seed."),
) -> None:
    """
    Write a generated benchmark text to disk.
    """
    try:
        text = generate_sample_text(size, seed=seed)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    write_text(output, text)
    typer.echo(f"[sample] Wrote {size} words to {output}")


@app.command()
def benchmark(
    size: int = typer.Option(DEFAULT_SAMPLE_SIZE, "--size", help="Words in the generated benchmark text."),
    repeats: int = typer.Option(3, "--repeats", help="Timed runs per analyzer."),
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        exists=True,
        dir_okay=False,
        help="Benchmark on this file instead of generated text.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """
    Compare the naive multi-pass analyzer against the single-pass engine.
    """
    _configure_logging(verbose)
    try:
        text = load_text(path) if path is not None else generate_sample_text(size)
        report = run_benchmark(text, repeats=repeats)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _echo_report(report)


def _echo_report(report: BenchmarkReport) -> None:
    typer.echo(f"[benchmark] Analyzing {report.text_length} characters of text")
    typer.echo("=" * 50)
    typer.echo("Results (both analyzers agree):")
    _echo_result(report.result, preview=3)
    for timing in (report.slow, report.fast):
        typer.echo(
            f"  {timing.label:>4}: median {timing.median_ms:.2f} ms, "
            f"mean {timing.mean_ms:.2f} ms, best {timing.best_ms:.2f} ms"
        )
    typer.echo("=" * 50)
    if report.speedup is None:
        typer.echo("[benchmark] Too fast to measure accurately.")
    else:
        typer.echo(f"[benchmark] Speedup: {report.speedup:.1f}x ({report.status})")


if __name__ == "__main__":
    app()
