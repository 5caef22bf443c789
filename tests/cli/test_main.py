"""Tests for the oracle-capture typer app."""

from pathlib import Path

from typer.testing import CliRunner

from oracle_capture.cli.main import app
from oracle_capture.codec.infrastructure.line_codec import deserialize
from tests.references import parity, safe_div

FIXTURES = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


def _generate(*args: str):
    return runner.invoke(app, ["generate", *args, "--log-format", "json"])


def _verify(*args: str):
    return runner.invoke(app, ["verify", *args, "--log-format", "json"])


class TestGenerate:
    def test_writes_requested_number_of_lines(self, tmp_path: Path) -> None:
        out = tmp_path / "parity.csv"

        result = _generate(
            "tests.references:parity", "--count", "20", "--seed", "3", "-o", str(out)
        )

        assert result.exit_code == 0, result.output
        lines = out.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 20
        assert all(len(line.split(",")) == 4 for line in lines)

    def test_recorded_outputs_match_the_reference(self, tmp_path: Path) -> None:
        out = tmp_path / "parity.csv"

        _generate("tests.references:parity", "--seed", "3", "-o", str(out))

        sample_set = deserialize(out.read_text(encoding="utf-8"))
        assert len(sample_set.records) == 200
        for record in sample_set.records:
            assert record.output == parity(*record.inputs)

    def test_same_seed_gives_identical_files(self, tmp_path: Path) -> None:
        first = tmp_path / "a.csv"
        second = tmp_path / "b.csv"

        _generate("tests.references:parity", "--seed", "11", "-o", str(first))
        _generate("tests.references:parity", "--seed", "11", "-o", str(second))

        assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")

    def test_size_bounds_drawn_values(self, tmp_path: Path) -> None:
        out = tmp_path / "parity.csv"

        _generate(
            "tests.references:parity", "--size", "2", "--seed", "1", "-o", str(out)
        )

        for record in deserialize(out.read_text(encoding="utf-8")).records:
            assert all(-2 <= value <= 2 for value in record.inputs)

    def test_writes_to_stdout_by_default(self) -> None:
        result = _generate("tests.references:negate", "--count", "3", "--seed", "5")

        assert result.exit_code == 0, result.output
        record_lines = [
            line for line in result.stdout.splitlines() if line in {
                "true,false",
                "false,true",
            }
        ]
        assert len(record_lines) == 3

    def test_summary_reports_the_seed(self, tmp_path: Path) -> None:
        result = _generate(
            "tests.references:parity",
            "--count",
            "2",
            "--seed",
            "314",
            "-o",
            str(tmp_path / "out.csv"),
        )

        assert "Seed" in result.output
        assert "314" in result.output

    def test_zero_count_writes_empty_file(self, tmp_path: Path) -> None:
        out = tmp_path / "empty.csv"

        result = _generate("tests.references:parity", "--count", "0", "-o", str(out))

        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == ""

    def test_creates_missing_output_directory(self, tmp_path: Path) -> None:
        out = tmp_path / "nested" / "dir" / "cases.csv"

        result = _generate("tests.references:parity", "--count", "1", "-o", str(out))

        assert result.exit_code == 0, result.output
        assert out.exists()

    def test_explicit_types_for_unannotated_reference(self, tmp_path: Path) -> None:
        out = tmp_path / "sum.csv"

        result = _generate(
            "tests.references:unannotated",
            "-p",
            "int",
            "-p",
            "int",
            "--returns",
            "int",
            "--count",
            "5",
            "-o",
            str(out),
        )

        assert result.exit_code == 0, result.output
        for record in deserialize(out.read_text(encoding="utf-8")).records:
            assert record.output == sum(record.inputs)

    def test_console_log_format_renders_progress(self, tmp_path: Path) -> None:
        out = tmp_path / "parity.csv"

        result = runner.invoke(
            app,
            ["generate", "tests.references:parity", "--count", "5", "-o", str(out)],
        )

        assert result.exit_code == 0, result.output
        assert len(out.read_text(encoding="utf-8").splitlines()) == 5


class TestGenerateFailurePolicies:
    def test_abort_exits_non_zero_and_names_the_tuple(self, tmp_path: Path) -> None:
        out = tmp_path / "div.csv"

        result = _generate(
            "tests.references:safe_div",
            "--size",
            "1",
            "--count",
            "60",
            "--seed",
            "9",
            "-o",
            str(out),
        )

        assert result.exit_code == 1
        assert "Failed to evaluate reference" in result.output
        assert "ZeroDivisionError" in result.output

    def test_abort_writes_no_output_file(self, tmp_path: Path) -> None:
        out = tmp_path / "div.csv"

        _generate(
            "tests.references:safe_div",
            "--size",
            "1",
            "--count",
            "60",
            "--seed",
            "9",
            "-o",
            str(out),
        )

        assert not out.exists()

    def test_skip_drops_failures_and_succeeds(self, tmp_path: Path) -> None:
        out = tmp_path / "div.csv"

        result = _generate(
            "tests.references:safe_div",
            "--size",
            "1",
            "--count",
            "60",
            "--seed",
            "9",
            "--on-error",
            "skip",
            "-o",
            str(out),
        )

        assert result.exit_code == 0, result.output
        records = deserialize(out.read_text(encoding="utf-8")).records
        assert 0 < len(records) < 60
        assert all(record.inputs[1] != 0 for record in records)
        assert all(record.output == safe_div(*record.inputs) for record in records)
        assert "Skipped draws" in result.output


class TestGenerateConfiguration:
    def test_reads_config_file(self, tmp_path: Path) -> None:
        out = tmp_path / "parity.csv"

        result = _generate(
            "--config", str(FIXTURES / "valid_config.yaml"), "-o", str(out)
        )

        assert result.exit_code == 0, result.output
        assert len(out.read_text(encoding="utf-8").splitlines()) == 50

    def test_flags_override_config_file(self, tmp_path: Path) -> None:
        out = tmp_path / "parity.csv"

        result = _generate(
            "--config",
            str(FIXTURES / "valid_config.yaml"),
            "--count",
            "4",
            "-o",
            str(out),
        )

        assert result.exit_code == 0, result.output
        assert len(out.read_text(encoding="utf-8").splitlines()) == 4

    def test_config_seed_is_reproducible(self, tmp_path: Path) -> None:
        from_config = tmp_path / "a.csv"
        from_flags = tmp_path / "b.csv"

        _generate("--config", str(FIXTURES / "valid_config.yaml"), "-o", str(from_config))
        _generate(
            "tests.references:parity",
            "--count",
            "50",
            "--size",
            "10",
            "--seed",
            "1234",
            "-o",
            str(from_flags),
        )

        assert from_config.read_text(encoding="utf-8") == from_flags.read_text(
            encoding="utf-8"
        )

    def test_missing_reference_exits_non_zero(self) -> None:
        result = _generate("--count", "1")

        assert result.exit_code == 1
        assert "no reference function given" in result.output

    def test_unknown_reference_exits_non_zero(self) -> None:
        result = _generate("tests.references:nope")

        assert result.exit_code == 1
        assert "Failed to load reference" in result.output

    def test_non_positive_size_exits_before_generation(self, tmp_path: Path) -> None:
        out = tmp_path / "parity.csv"

        result = _generate("tests.references:parity", "--size", "0", "-o", str(out))

        assert result.exit_code == 1
        assert "Failed to validate configuration" in result.output
        assert not out.exists()

    def test_size_beyond_float_range_exits_before_generation(
        self, tmp_path: Path
    ) -> None:
        out = tmp_path / "midpoint.csv"

        result = _generate(
            "tests.references:midpoint", "--size", str(10**400), "-o", str(out)
        )

        assert result.exit_code == 1
        assert "Failed to validate configuration" in result.output
        assert "Unexpected error" not in result.output
        assert not out.exists()

    def test_skip_flag_logs_skip_policy_warning(self, tmp_path: Path) -> None:
        out = tmp_path / "div.csv"

        result = _generate(
            "tests.references:safe_div", "--on-error", "skip", "-o", str(out)
        )

        assert result.exit_code == 0
        assert "config.skip_policy_warning" in result.output

    def test_negative_count_exits_non_zero(self) -> None:
        result = _generate("tests.references:parity", "--count", "-1")

        assert result.exit_code == 1
        assert "Failed to validate configuration" in result.output

    def test_unannotated_reference_without_types_exits_non_zero(self) -> None:
        result = _generate("tests.references:unannotated")

        assert result.exit_code == 1
        assert "no type annotation" in result.output

    def test_missing_config_file_exits_non_zero(self, tmp_path: Path) -> None:
        result = _generate("--config", str(tmp_path / "missing.yaml"))

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

    def test_unknown_scalar_type_is_a_usage_error(self) -> None:
        result = _generate("tests.references:parity", "-p", "str")

        assert result.exit_code == 2


class TestVerify:
    def test_matching_candidate_exits_zero(self) -> None:
        result = _verify(
            "tests.references:parity_refactored",
            str(FIXTURES / "parity_samples.csv"),
        )

        assert result.exit_code == 0, result.output
        assert "3/3 records match" in result.output

    def test_mismatching_candidate_exits_non_zero(self) -> None:
        result = _verify(
            "tests.references:parity_broken", str(FIXTURES / "parity_samples.csv")
        )

        assert result.exit_code == 1
        assert "line 1" in result.output
        assert "2/3 records match" in result.output

    def test_explicit_signature(self) -> None:
        result = _verify(
            "tests.references:midpoint",
            str(FIXTURES / "midpoint_samples.csv"),
            "-p",
            "float",
            "-p",
            "float",
            "--returns",
            "float",
        )

        assert result.exit_code == 0, result.output

    def test_malformed_file_exits_non_zero_citing_line(self) -> None:
        result = _verify(
            "tests.references:parity", str(FIXTURES / "malformed_samples.csv")
        )

        assert result.exit_code == 1
        assert "line 2" in result.output

    def test_missing_file_exits_non_zero(self, tmp_path: Path) -> None:
        result = _verify("tests.references:parity", str(tmp_path / "missing.csv"))

        assert result.exit_code == 1
        assert "Failed to load sample set" in result.output


class TestGenerateThenVerify:
    def test_refactor_checked_against_capture(self, tmp_path: Path) -> None:
        capture = tmp_path / "parity.csv"

        generated = _generate(
            "tests.references:parity", "--seed", "2024", "-o", str(capture)
        )
        verified = _verify("tests.references:parity_refactored", str(capture))
        broken = _verify("tests.references:parity_broken", str(capture))

        assert generated.exit_code == 0, generated.output
        assert verified.exit_code == 0, verified.output
        assert broken.exit_code == 1
