"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from oracle_capture.config.domain.config import OracleConfig
from oracle_capture.config.domain.observer import ConfigObserver
from oracle_capture.config.domain.sampling import FailurePolicy
from oracle_capture.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigurationError,
)


class YamlConfigLoader:
    """Loads, validates, and returns an OracleConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> OracleConfig:
        """
        Load, validate, and return an OracleConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist.
            ConfigurationError: if the file is not valid YAML, is not a mapping,
                or violates the OracleConfig schema.
        """
        raw = _parse_yaml(path=path)
        cfg = build_config(raw=raw)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(path=str(path), reference=cfg.reference)
        return cfg


def build_config(raw: Any) -> OracleConfig:
    """Validate raw mapping data into an OracleConfig.

    Raises:
        ConfigurationError: if raw is not a mapping or fails validation.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"expected a mapping at the top level, got {type(raw).__name__}"
        )
    try:
        return OracleConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid YAML in {path}: {exc}") from exc


def _emit_warnings(cfg: OracleConfig, observer: ConfigObserver) -> None:
    if cfg.sampling.on_error is FailurePolicy.SKIP:
        observer.config_skip_policy_warning()
