"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from oracle_capture.config.domain.sampling import FailurePolicy
from oracle_capture.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigurationError,
)
from oracle_capture.config.infrastructure.yaml_loader import (
    YamlConfigLoader,
    build_config,
)
from oracle_capture.sampling.domain.scalar import ScalarType
from tests.config.fake_observer import FakeConfigObserver

# __file__ is tests/config/infrastructure/test_yaml_loader.py
# parent.parent.parent is the tests/ directory
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _fixture(name: str) -> Path:
    return FIXTURES / name


class TestValidConfigLoading:
    def test_loads_reference_and_types(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )

        assert cfg.reference == "tests.references:parity"
        assert cfg.parameters == [ScalarType.INT, ScalarType.INT, ScalarType.INT]
        assert cfg.returns is ScalarType.BOOL

    def test_loads_sampling_block(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )

        assert cfg.sampling.count == 50
        assert cfg.sampling.size == 10
        assert cfg.sampling.seed == 1234
        assert cfg.sampling.on_error is FailurePolicy.ABORT

    def test_loads_output_path(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )

        assert cfg.output == Path("captures/parity.csv")

    def test_partial_sampling_block_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "oracle.yaml"
        path.write_text("sampling:\n  seed: 3\n", encoding="utf-8")

        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(path=path)

        assert cfg.sampling.count == 200
        assert cfg.sampling.size == 100

    def test_empty_file_gives_default_config(self, tmp_path: Path) -> None:
        path = tmp_path / "oracle.yaml"
        path.write_text("", encoding="utf-8")

        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(path=path)

        assert cfg.reference is None
        assert cfg.sampling.count == 200


class TestObserverEvents:
    def test_config_loaded_emitted(self) -> None:
        observer = FakeConfigObserver()
        path = _fixture("valid_config.yaml")

        YamlConfigLoader(observer=observer).load(path=path)

        assert len(observer.loaded) == 1
        assert observer.loaded[0].path == str(path)
        assert observer.loaded[0].reference == "tests.references:parity"

    def test_skip_policy_emits_warning(self) -> None:
        observer = FakeConfigObserver()

        YamlConfigLoader(observer=observer).load(path=_fixture("skip_config.yaml"))

        assert observer.skip_policy_warnings == 1

    def test_abort_policy_emits_no_warning(self) -> None:
        observer = FakeConfigObserver()

        YamlConfigLoader(observer=observer).load(path=_fixture("valid_config.yaml"))

        assert observer.skip_policy_warnings == 0


class TestInvalidConfig:
    def test_missing_file_raises_config_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="file not found"):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=tmp_path / "missing.yaml"
            )

    def test_schema_violation_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("invalid_config.yaml")
            )

        message = str(exc_info.value)
        assert "count" in message
        assert "size" in message

    def test_non_mapping_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="mapping"):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("not_mapping.yaml")
            )

    def test_invalid_yaml_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="invalid YAML"):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("broken.yaml")
            )

    def test_no_event_emitted_on_failure(self) -> None:
        observer = FakeConfigObserver()

        with pytest.raises(ConfigurationError):
            YamlConfigLoader(observer=observer).load(
                path=_fixture("invalid_config.yaml")
            )

        assert observer.loaded == []


class TestBuildConfig:
    def test_none_gives_defaults(self) -> None:
        assert build_config(raw=None).sampling.count == 200

    def test_unknown_scalar_type_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            build_config(raw={"parameters": ["str"]})
