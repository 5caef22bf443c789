"""CLI entrypoint for oracle-capture — typer app with `generate` and `verify` commands."""

import logging
import sys
from enum import StrEnum
from pathlib import Path

import structlog
import typer

from oracle_capture.codec.domain.observer import CodecObserver
from oracle_capture.codec.infrastructure.file_loader import SampleSetFileLoader
from oracle_capture.codec.infrastructure.line_codec import write_sample_set
from oracle_capture.codec.infrastructure.observer import StructlogCodecObserver
from oracle_capture.config.domain.config import OracleConfig
from oracle_capture.config.domain.observer import ConfigObserver
from oracle_capture.config.domain.sampling import FailurePolicy
from oracle_capture.config.infrastructure.errors import ConfigurationError
from oracle_capture.config.infrastructure.observer import StructlogConfigObserver
from oracle_capture.config.infrastructure.overrides import apply_overrides
from oracle_capture.config.infrastructure.yaml_loader import YamlConfigLoader
from oracle_capture.core.errors import OracleError
from oracle_capture.replay.application.replayer import Replayer
from oracle_capture.replay.domain.report import ReplayReport
from oracle_capture.replay.infrastructure.observer import StructlogReplayObserver
from oracle_capture.sampling.application.sampler import OracleSampler
from oracle_capture.sampling.domain.observer import SamplingObserver
from oracle_capture.sampling.domain.record import GenerationResult, SampleSet
from oracle_capture.sampling.domain.scalar import ScalarType
from oracle_capture.sampling.infrastructure.composite_observer import (
    CompositeSamplingObserver,
)
from oracle_capture.sampling.infrastructure.observer import StructlogSamplingObserver
from oracle_capture.sampling.infrastructure.progress_observer import (
    ProgressSamplingObserver,
)
from oracle_capture.sampling.infrastructure.reference_loader import (
    infer_signature,
    load_reference,
)

app = typer.Typer(add_completion=False)

# Diagnostics listed in the summary before the remainder is elided.
_MAX_LISTED = 10


class LogFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


def _configure_structlog(log_format: LogFormat, verbose: bool) -> None:
    """Configure structlog to write to stderr; stdout carries sample data only."""
    if log_format is LogFormat.JSON:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _ensure_importable(directory: Path) -> None:
    """Let references in the working directory import like they would in tests."""
    entry = str(directory)
    if entry not in sys.path:
        sys.path.insert(0, entry)


def _load_config(config_path: Path | None, observer: ConfigObserver) -> OracleConfig:
    if config_path is None:
        return OracleConfig()
    return YamlConfigLoader(observer=observer).load(path=config_path)


def _write_output(
    sample_set: SampleSet, output: Path | None, observer: CodecObserver
) -> str:
    """Write the sample set to output or stdout. Returns a display destination."""
    if output is None:
        write_sample_set(sample_set=sample_set, stream=sys.stdout)
        sys.stdout.flush()
        destination = "<stdout>"
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8", newline="\n") as fh:
            write_sample_set(sample_set=sample_set, stream=fh)
        destination = str(output)
    observer.sample_set_written(
        destination=destination, total_records=len(sample_set.records)
    )
    return destination


def _echo(message: str = "") -> None:
    typer.echo(message, err=True)


def _print_generation_summary(result: GenerationResult, destination: str) -> None:
    """Print the seed and record counts so the run can be reproduced."""
    label = typer.style
    _echo("")
    _echo(label("oracle-capture  ·  Capture Complete", fg="cyan", bold=True))
    rows: list[tuple[str, str]] = [
        ("Signature", result.signature.describe()),
        ("Seed", str(result.seed)),
        ("Records", str(len(result.sample_set.records))),
        ("Skipped", str(len(result.skipped))),
        ("Output", destination),
    ]
    label_w = max(len(name) for name, _ in rows)
    for name, value in rows:
        _echo(f"  {label(f'{name:<{label_w}}', dim=True)}  {value}")

    if result.skipped:
        _echo("")
        _echo(label(f"  Skipped draws  ({len(result.skipped)} total)", fg="yellow"))
        for skipped in result.skipped[:_MAX_LISTED]:
            _echo(f"  #{skipped.index} {skipped.inputs!r}: {skipped.reason}")
        if len(result.skipped) > _MAX_LISTED:
            _echo(f"  … and {len(result.skipped) - _MAX_LISTED} more")


def _print_replay_summary(report: ReplayReport, sha256: str) -> None:
    label = typer.style
    matched = report.total - len(report.mismatches)
    _echo("")
    for mismatch in report.mismatches[:_MAX_LISTED]:
        got = (
            mismatch.actual if mismatch.actual is not None else f"raised {mismatch.error}"
        )
        _echo(
            f"  line {mismatch.line_number}: inputs {mismatch.inputs!r}"
            f" expected {mismatch.expected!r} got {got}"
        )
    if len(report.mismatches) > _MAX_LISTED:
        _echo(f"  … and {len(report.mismatches) - _MAX_LISTED} more")

    color = "green" if report.passed else "red"
    _echo(
        label(f"{matched}/{report.total} records match", fg=color, bold=True)
        + label(f"  (sha256 {sha256[:16]}...)", dim=True)
    )


@app.command()
def generate(
    reference: str | None = typer.Argument(
        None, help="Reference function as 'package.module:function'"
    ),
    parameters: list[ScalarType] | None = typer.Option(
        None,
        "--param",
        "-p",
        help="Parameter type, repeated once per parameter in order",
    ),
    returns: ScalarType | None = typer.Option(
        None, "--returns", "-r", help="Output type"
    ),
    count: int | None = typer.Option(
        None, "--count", "-n", help="Number of samples to draw [default: 200]"
    ),
    size: int | None = typer.Option(
        None, "--size", "-s", help="Magnitude bound for drawn values [default: 100]"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed; a fresh one is chosen and reported if unset"
    ),
    on_error: FailurePolicy | None = typer.Option(
        None,
        "--on-error",
        help="On reference failure: abort the run or skip the tuple [default: abort]",
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write samples here instead of stdout"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="YAML config file; flags override its values"
    ),
    log_format: LogFormat = typer.Option(LogFormat.CONSOLE, "--log-format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every sample"),
) -> None:
    """Capture a reference function's outputs on random inputs as fixed test data."""
    try:
        _configure_structlog(log_format=log_format, verbose=verbose)
        _ensure_importable(directory=Path.cwd())

        config_observer = StructlogConfigObserver()
        config = apply_overrides(
            _load_config(config_path=config_path, observer=config_observer),
            observer=config_observer,
            reference=reference,
            parameters=parameters or None,
            returns=returns,
            count=count,
            size=size,
            seed=seed,
            on_error=on_error,
            output=output,
        )
        if config.reference is None:
            raise ConfigurationError(
                "no reference function given; pass REFERENCE or set 'reference'"
                " in the config file"
            )

        fn = load_reference(target=config.reference)
        signature = infer_signature(
            fn=fn, parameters=config.parameters, returns=config.returns
        )

        observers: list[SamplingObserver] = [StructlogSamplingObserver()]
        if log_format is not LogFormat.JSON:
            observers.append(ProgressSamplingObserver())

        sampler = OracleSampler(
            reference=fn,
            signature=signature,
            observer=CompositeSamplingObserver(observers=observers),
            reference_name=config.reference,
        )
        result = sampler.generate(config=config.sampling)

        destination = _write_output(
            sample_set=result.sample_set,
            output=config.output,
            observer=StructlogCodecObserver(),
        )
        _print_generation_summary(result=result, destination=destination)

    except KeyboardInterrupt:
        _echo("Capture interrupted.")
        sys.exit(1)
    except OracleError as exc:
        _echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        _echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command()
def verify(
    candidate: str = typer.Argument(
        ..., help="Implementation under test as 'package.module:function'"
    ),
    samples: Path = typer.Argument(..., help="Capture file written by `generate`"),
    parameters: list[ScalarType] | None = typer.Option(
        None,
        "--param",
        "-p",
        help="Parameter type, repeated once per parameter in order",
    ),
    returns: ScalarType | None = typer.Option(
        None, "--returns", "-r", help="Output type"
    ),
    log_format: LogFormat = typer.Option(LogFormat.CONSOLE, "--log-format"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Replay a capture file against a candidate and report every mismatch.

    Without --param/--returns each field's type is recognised from its text.
    """
    try:
        _configure_structlog(log_format=log_format, verbose=verbose)
        _ensure_importable(directory=Path.cwd())

        fn = load_reference(target=candidate)
        signature = (
            infer_signature(fn=fn, parameters=parameters or None, returns=returns)
            if parameters or returns is not None
            else None
        )

        loaded = SampleSetFileLoader(observer=StructlogCodecObserver()).load(
            path=samples, signature=signature
        )
        replayer = Replayer(
            candidate=fn,
            observer=StructlogReplayObserver(),
            candidate_name=candidate,
        )
        report = replayer.replay(sample_set=loaded.sample_set)
        _print_replay_summary(report=report, sha256=loaded.sha256)

    except KeyboardInterrupt:
        _echo("Verification interrupted.")
        sys.exit(1)
    except OracleError as exc:
        _echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        _echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)

    if not report.passed:
        sys.exit(1)


if __name__ == "__main__":
    app()
