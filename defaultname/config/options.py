"""Checker options and their validation from already-parsed configuration data."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Final

from defaultname.errors import ConfigurationError
from defaultname.naming import CaseTransform

DEFAULT_IGNORE_PATTERNS: Final[tuple[str, ...]] = ("/node_modules/",)

_OPTION_KEYS = frozenset({"ignore", "overrides"})
_RULE_KEYS = frozenset({"module", "name", "transform"})


@dataclass(frozen=True, slots=True)
class OverrideRule:
    """Custom default-import names for modules matching `module`."""

    module: str
    names: tuple[str, ...]
    transform: CaseTransform = CaseTransform.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.module, str):
            raise ConfigurationError("Override `module` must be a string")
        if not self.names:
            raise ConfigurationError(f"Override for `{self.module}` must declare at least one name")
        if not all(isinstance(name, str) for name in self.names):
            raise ConfigurationError(f"Override names for `{self.module}` must be strings")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> OverrideRule:
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"Override rule must be an object, got {type(raw).__name__}")
        unknown = sorted(set(raw) - _RULE_KEYS)
        if unknown:
            raise ConfigurationError(f"Unknown override key(s): {', '.join(unknown)}")
        if "module" not in raw or "name" not in raw:
            raise ConfigurationError("Override rule requires `module` and `name`")

        name = raw["name"]
        if isinstance(name, str):
            names: tuple[str, ...] = (name,)
        elif isinstance(name, Sequence):
            names = tuple(name)
        else:
            raise ConfigurationError("Override `name` must be a string or a list of strings")

        return cls(
            module=raw["module"],  # type: ignore[arg-type]
            names=names,
            transform=_parse_transform(raw.get("transform")),
        )


@dataclass(frozen=True, slots=True)
class MatchDefaultExportNameOptions:
    """`ignore` patterns and `overrides` rules for the default export name check."""

    ignore: tuple[str, ...] = DEFAULT_IGNORE_PATTERNS
    overrides: tuple[OverrideRule, ...] = ()

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object] | None) -> MatchDefaultExportNameOptions:
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"Options must be an object, got {type(raw).__name__}")
        unknown = sorted(set(raw) - _OPTION_KEYS)
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")

        ignore = raw.get("ignore")
        if ignore is None:
            ignore_patterns = DEFAULT_IGNORE_PATTERNS
        elif isinstance(ignore, Sequence) and not isinstance(ignore, str) and all(
            isinstance(pattern, str) for pattern in ignore
        ):
            ignore_patterns = tuple(ignore)
        else:
            raise ConfigurationError("`ignore` must be a list of strings")

        overrides = raw.get("overrides")
        if overrides is None:
            rules: tuple[OverrideRule, ...] = ()
        elif isinstance(overrides, Sequence) and not isinstance(overrides, str):
            rules = tuple(OverrideRule.from_mapping(rule) for rule in overrides)
        else:
            raise ConfigurationError("`overrides` must be a list of override rules")

        return cls(ignore=ignore_patterns, overrides=rules)


def _parse_transform(value: object) -> CaseTransform:
    if value is None:
        return CaseTransform.NONE
    try:
        return CaseTransform(value)
    except ValueError:
        allowed = ", ".join(transform.value for transform in CaseTransform if transform is not CaseTransform.NONE)
        raise ConfigurationError(f"Unknown transform `{value}`; expected one of {allowed}") from None
