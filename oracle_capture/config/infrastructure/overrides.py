"""Layer command-line overrides on top of a loaded OracleConfig."""

from typing import Any

from pydantic import ValidationError

from oracle_capture.config.domain.config import OracleConfig
from oracle_capture.config.domain.observer import ConfigObserver
from oracle_capture.config.domain.sampling import FailurePolicy, SamplingConfig
from oracle_capture.config.infrastructure.errors import ConfigurationError

_SAMPLING_KEYS = frozenset(SamplingConfig.model_fields)


def build_sampling_config(**values: Any) -> SamplingConfig:
    """Build a validated SamplingConfig, ignoring values that are None.

    Raises:
        ConfigurationError: if any value violates the SamplingConfig schema.
    """
    provided = {key: value for key, value in values.items() if value is not None}
    try:
        return SamplingConfig.model_validate(provided)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def apply_overrides(
    config: OracleConfig, observer: ConfigObserver | None = None, **overrides: Any
) -> OracleConfig:
    """
    Return a copy of config with every non-None override applied.

    Sampling keys (count, size, seed, on_error) update the nested sampling
    block; the rest update top-level fields. The merged result is validated
    again so a bad flag fails the same way a bad config file does. When an
    override switches on the skip policy, observer receives the same warning
    a config file setting it would produce.

    Raises:
        ConfigurationError: if the merged config is invalid.
    """
    data = config.model_dump()
    for key, value in overrides.items():
        if value is None:
            continue
        if key in _SAMPLING_KEYS:
            data["sampling"][key] = value
        elif key in OracleConfig.model_fields:
            data[key] = value
        else:
            raise ConfigurationError(f"unknown setting '{key}'")
    try:
        merged = OracleConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc

    if (
        observer is not None
        and config.sampling.on_error is not FailurePolicy.SKIP
        and merged.sampling.on_error is FailurePolicy.SKIP
    ):
        observer.config_skip_policy_warning()
    return merged
