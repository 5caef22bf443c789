"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str, reference: str | None) -> None: ...

    def config_skip_policy_warning(self) -> None: ...
