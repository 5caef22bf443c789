"""Sample-set file loader — reads a persisted capture into a SampleSet."""

import hashlib
from io import StringIO
from pathlib import Path

from oracle_capture.codec.domain.load_result import SampleSetLoadResult
from oracle_capture.codec.domain.observer import CodecObserver
from oracle_capture.codec.infrastructure.errors import ParseError, SampleSetLoadError
from oracle_capture.codec.infrastructure.line_codec import read_sample_set
from oracle_capture.sampling.domain.scalar import Signature


class SampleSetFileLoader:
    """Loads a capture file and returns its SampleSet and SHA-256 digest."""

    def __init__(self, observer: CodecObserver) -> None:
        self._observer = observer

    def load(
        self, path: Path, signature: Signature | None = None
    ) -> SampleSetLoadResult:
        """
        Load every record from the file at path.

        Raises:
            SampleSetLoadError: if the file does not exist or is not UTF-8.
            ParseError: if any line is malformed. No partial set is returned.
        """
        path_str = str(path)
        self._observer.sample_set_loading_started(path=path_str)

        try:
            raw_bytes = path.read_bytes()
        except FileNotFoundError as exc:
            reason = f"file not found: {path_str}"
            self._observer.sample_set_loading_failed(path=path_str, reason=reason)
            raise SampleSetLoadError(reason=reason) from exc

        try:
            text = raw_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            reason = f"not valid UTF-8: {path_str}"
            self._observer.sample_set_loading_failed(path=path_str, reason=reason)
            raise SampleSetLoadError(reason=reason) from exc

        try:
            sample_set = read_sample_set(
                stream=StringIO(text, newline=None), signature=signature
            )
        except ParseError as exc:
            self._observer.sample_set_loading_failed(path=path_str, reason=str(exc))
            raise

        sha256 = hashlib.sha256(raw_bytes).hexdigest()
        self._observer.sample_set_loading_completed(
            path=path_str,
            total_records=len(sample_set.records),
            sha256=sha256,
        )
        return SampleSetLoadResult(sample_set=sample_set, sha256=sha256)
