"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, reference: str | None) -> None:
        self._log.info("config.loaded", path=path, reference=reference)

    def config_skip_policy_warning(self) -> None:
        self._log.warning(
            "config.skip_policy_warning",
            message="Failing tuples will be dropped; the sample set may be short",
        )
