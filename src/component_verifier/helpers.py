"""
Reusable parameter checks for verifier implementations.

Each check inspects a parameter mapping and returns VerificationError
values rather than raising, so several problems can be reported at once.
"""

from collections.abc import Sized
from typing import Any, Iterable, Mapping

from .builder import ResultErrorBuilder
from .errors import StandardAttribute, StandardCode, VerificationError


EXCLUDED_PREFIX = "!"


class OptionsGroup:
    """
    A named set of options forming one valid configuration alternative.

    Options prefixed with "!" must be absent for the group to apply, e.g.
    OptionsGroup("token", ["token", "!username", "!password"]).
    """

    def __init__(self, name: str, options: Iterable[str] = ()):
        self.name = name
        self._options: list[str] = []
        self.options(options)

    @classmethod
    def with_name(cls, name: str) -> "OptionsGroup":
        return cls(name)

    def option(self, option: str) -> "OptionsGroup":
        if option not in self._options:
            self._options.append(option)
        return self

    def options(self, options: Iterable[str]) -> "OptionsGroup":
        for option in options:
            self.option(option)
        return self

    @property
    def required(self) -> set[str]:
        return {o for o in self._options if not o.startswith(EXCLUDED_PREFIX)}

    @property
    def excluded(self) -> set[str]:
        return {o[len(EXCLUDED_PREFIX):] for o in self._options if o.startswith(EXCLUDED_PREFIX)}

    @property
    def parameter_names(self) -> list[str]:
        """All option names without the exclusion prefix, in declaration order."""
        return [o[len(EXCLUDED_PREFIX):] if o.startswith(EXCLUDED_PREFIX) else o for o in self._options]

    def __repr__(self) -> str:
        return f"OptionsGroup(name={self.name!r}, options={self._options!r})"


def is_empty(value: Any) -> bool:
    """True for None, blank strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def requires_option(parameters: Mapping[str, Any], name: str) -> VerificationError | None:
    """Return a missing-option error if name has no value in parameters."""
    if is_empty(parameters.get(name)):
        return ResultErrorBuilder.with_missing_option(name).build()
    return None


def requires_options(parameters: Mapping[str, Any], names: Iterable[str]) -> list[VerificationError]:
    """Apply requires_option to every name, in order."""
    errors: list[VerificationError] = []
    for name in names:
        error = requires_option(parameters, name)
        if error is not None:
            errors.append(error)
    return errors


def requires_any(
    parameters: Mapping[str, Any],
    groups: Iterable[OptionsGroup],
) -> list[VerificationError]:
    """
    Check that the parameters satisfy at least one options group.

    Returns an empty list as soon as one group is satisfied. Otherwise
    returns one ILLEGAL_PARAMETER_GROUP_COMBINATION error per group. A group
    with missing required options is keyed by those options only; excluded
    options that were given are reported only once every required option
    of the group is present.
    """
    errors: list[VerificationError] = []
    keys = set(parameters.keys())

    for group in groups:
        required = group.required
        excluded = group.excluded

        builder = (
            ResultErrorBuilder.with_code(StandardCode.ILLEGAL_PARAMETER_GROUP_COMBINATION)
            .detail(StandardAttribute.GROUP_NAME, group.name)
            .detail(StandardAttribute.GROUP_OPTIONS, ",".join(group.parameter_names))
        )

        if required <= keys:
            shared = keys & excluded
            if not shared:
                return []
            builder.parameter_keys(sorted(shared))
        else:
            builder.parameter_keys(sorted(required - keys))

        errors.append(builder.build())

    return errors
