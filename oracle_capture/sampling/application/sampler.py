"""OracleSampler — captures a reference implementation's behaviour as a SampleSet."""

import time
from collections.abc import Callable

from oracle_capture.codec.domain.scalar_text import encode_fields, encode_scalar
from oracle_capture.config.domain.sampling import FailurePolicy, SamplingConfig
from oracle_capture.sampling.domain.generator import GeneratorFactory
from oracle_capture.sampling.domain.observer import SamplingObserver
from oracle_capture.sampling.domain.record import (
    GenerationResult,
    InputTuple,
    SampleRecord,
    SampleSet,
    SkippedSample,
)
from oracle_capture.sampling.domain.scalar import Scalar, Signature, conform_output
from oracle_capture.sampling.infrastructure.errors import EvaluationError
from oracle_capture.sampling.infrastructure.random_generator import (
    RandomInputGenerator,
    fresh_seed,
)


class OracleSampler:
    """Draws input tuples, evaluates the reference once per tuple, records pairs.

    The reference is treated as an opaque pure function: it is called exactly
    once per drawn tuple and its result is never recomputed.
    """

    def __init__(
        self,
        reference: Callable[..., object],
        signature: Signature,
        observer: SamplingObserver,
        reference_name: str = "<reference>",
        generator_factory: GeneratorFactory = RandomInputGenerator,
    ) -> None:
        self._reference = reference
        self._signature = signature
        self._observer = observer
        self._reference_name = reference_name
        self._generator_factory = generator_factory

    def generate(self, config: SamplingConfig) -> GenerationResult:
        """Generate config.count records and return them with the seed used.

        Under FailurePolicy.ABORT the first failing tuple raises
        EvaluationError. Under FailurePolicy.SKIP the tuple is dropped, a
        SkippedSample is recorded and generation continues without redrawing.
        """
        seed = config.seed if config.seed is not None else fresh_seed()
        generator = self._generator_factory(seed)

        self._observer.sampling_started(
            reference=self._reference_name,
            signature=self._signature.describe(),
            count=config.count,
            size=config.size,
            seed=seed,
            seed_source="supplied" if config.seed is not None else "fresh",
        )
        started_at = time.monotonic()

        records: list[SampleRecord] = []
        skipped: list[SkippedSample] = []

        for index in range(config.count):
            inputs = generator.draw(
                parameters=self._signature.parameters, size=config.size
            )
            try:
                output = self._evaluate(inputs=inputs)
            except Exception as exc:  # noqa: BLE001
                reason = f"{type(exc).__name__}: {exc}"
                if config.on_error is FailurePolicy.ABORT:
                    self._observer.sampling_failed(
                        index=index, inputs=encode_fields(inputs), reason=reason
                    )
                    raise EvaluationError(
                        index=index, inputs=inputs, reason=reason
                    ) from exc
                self._observer.sample_skipped(
                    index=index, inputs=encode_fields(inputs), reason=reason
                )
                skipped.append(SkippedSample(index=index, inputs=inputs, reason=reason))
                continue

            records.append(SampleRecord(inputs=inputs, output=output))
            self._observer.sample_evaluated(
                index=index,
                inputs=encode_fields(inputs),
                output=encode_scalar(output),
            )

        self._observer.sampling_completed(
            total_records=len(records),
            total_skipped=len(skipped),
            elapsed_seconds=time.monotonic() - started_at,
        )

        return GenerationResult(
            sample_set=SampleSet(records=tuple(records)),
            seed=seed,
            signature=self._signature,
            skipped=tuple(skipped),
        )

    def _evaluate(self, inputs: InputTuple) -> Scalar:
        """Invoke the reference once and check its result against the signature."""
        raw = self._reference(*inputs)
        return conform_output(value=raw, expected=self._signature.output)
