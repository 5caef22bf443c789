"""Resolve a reference function from an import target and infer its Signature."""

import importlib
import inspect
import typing
from collections.abc import Callable, Sequence

from oracle_capture.config.infrastructure.errors import ConfigurationError
from oracle_capture.sampling.domain.scalar import ScalarType, Signature
from oracle_capture.sampling.infrastructure.errors import ReferenceLoadError

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def load_reference(target: str) -> Callable[..., object]:
    """Import ``package.module:attribute`` and return the callable it names.

    The attribute part may be dotted (``module:Class.method``).

    Raises:
        ReferenceLoadError: if the target is malformed, the module cannot be
            imported, the attribute is missing, or it is not callable.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ReferenceLoadError(
            target=target, reason="expected the form 'package.module:function'"
        )

    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise ReferenceLoadError(target=target, reason=str(exc)) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ReferenceLoadError(
                target=target, reason=f"no attribute '{part}'"
            ) from exc

    if not callable(obj):
        raise ReferenceLoadError(target=target, reason="target is not callable")
    return obj


def infer_signature(
    fn: Callable[..., object],
    parameters: Sequence[ScalarType] | None = None,
    returns: ScalarType | None = None,
) -> Signature:
    """
    Build the Signature of fn from its annotations and any explicit overrides.

    Explicit parameters/returns take precedence over annotations. Only
    positional parameters are supported.

    Raises:
        ConfigurationError: if fn takes *args, **kwargs or keyword-only
            parameters, if the override arity disagrees with fn, or if a type
            is neither annotated with int/bool/float nor overridden.
    """
    name = getattr(fn, "__qualname__", repr(fn))
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"cannot inspect {name}: {exc}") from exc

    unsupported = [
        p.name for p in sig.parameters.values() if p.kind not in _POSITIONAL_KINDS
    ]
    if unsupported:
        raise ConfigurationError(
            f"{name} must take positional parameters only;"
            f" unsupported: {', '.join(unsupported)}"
        )

    params = list(sig.parameters.values())
    if parameters is not None and returns is not None:
        hints: dict[str, object] = {}
    else:
        hints = _type_hints(fn)

    if parameters is not None:
        if len(parameters) != len(params):
            raise ConfigurationError(
                f"{name} takes {len(params)} parameters but {len(parameters)}"
                " types were given"
            )
        parameter_types = tuple(parameters)
    else:
        parameter_types = tuple(
            _annotated_type(hints=hints, key=p.name, owner=name) for p in params
        )

    output = returns if returns is not None else _annotated_type(
        hints=hints, key="return", owner=name
    )
    return Signature(parameters=parameter_types, output=output)


def _type_hints(fn: Callable[..., object]) -> dict[str, object]:
    try:
        return typing.get_type_hints(fn)
    except NameError:
        # Unresolvable forward references: fall back to the raw annotations.
        return dict(getattr(fn, "__annotations__", {}))
    except TypeError:
        # partial objects and callable instances carry no annotations.
        return {}


def _annotated_type(hints: dict[str, object], key: str, owner: str) -> ScalarType:
    label = "return value" if key == "return" else f"parameter '{key}'"
    if key not in hints:
        raise ConfigurationError(
            f"{owner} {label} has no type annotation; declare its type explicitly"
        )
    scalar_type = ScalarType.from_python(hints[key])
    if scalar_type is None:
        raise ConfigurationError(
            f"{owner} {label} is annotated {hints[key]!r}; expected int, bool or float"
        )
    return scalar_type
