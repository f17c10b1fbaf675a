# src/option_merge/core/config/settings.py
"""
Settings do motor de merge de opções.

Este módulo define `MergeSettings`, o conjunto explícito de chaves que
alteram o comportamento do merge sem alterar suas estratégias:

    warnings.silent                   → suprime todos os avisos
    components.validate_names         → valida nomes declarados em `components`
    components.reserved_tags          → nomes extras tratados como tags reservadas

Os defaults embutidos (`DEFAULT_SETTINGS`) são a base sobre a qual
arquivos de settings são aplicados pelo loader.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping

from option_merge.core.constants import BUILT_IN_TAGS, HTML_TAGS, SVG_TAGS

from .errors import InvalidSettingError


DEFAULT_SETTINGS: Dict[str, Any] = {
    "warnings": {
        "silent": False,
    },
    "components": {
        "validate_names": True,
        "reserved_tags": [],
    },
}


@dataclass(frozen=True)
class MergeSettings:
    """Settings imutáveis consultados pelo `MergeContext` e pelo driver."""

    silent: bool = False
    validate_component_names: bool = True
    reserved_tags: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MergeSettings":
        warnings_cfg = _section(data, "warnings")
        components_cfg = _section(data, "components")

        silent = warnings_cfg.get("silent", False)
        validate_names = components_cfg.get("validate_names", True)
        reserved = components_cfg.get("reserved_tags", []) or []

        if not isinstance(silent, bool):
            raise InvalidSettingError(
                f"warnings.silent must be bool, got: {type(silent).__name__}"
            )
        if not isinstance(validate_names, bool):
            raise InvalidSettingError(
                f"components.validate_names must be bool, got: {type(validate_names).__name__}"
            )
        if not isinstance(reserved, (list, tuple)) or not all(isinstance(t, str) for t in reserved):
            raise InvalidSettingError("components.reserved_tags must be a list of strings")

        return cls(
            silent=silent,
            validate_component_names=validate_names,
            reserved_tags=frozenset(reserved),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "warnings": {"silent": self.silent},
            "components": {
                "validate_names": self.validate_component_names,
                "reserved_tags": sorted(self.reserved_tags),
            },
        }

    def is_built_in_tag(self, name: str) -> bool:
        return name.lower() in BUILT_IN_TAGS

    def is_reserved_tag(self, name: str) -> bool:
        return name in HTML_TAGS or name in SVG_TAGS or name in self.reserved_tags


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, Mapping):
        raise InvalidSettingError(f"'{key}' section must be a mapping, got: {type(section).__name__}")
    return section
