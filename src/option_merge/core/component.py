# src/option_merge/core/component.py
"""
Tipos de componente construtíveis.

Um tipo de componente é uma classe cujo atributo de classe `options`
guarda sua definição já mesclada. Tipos são aceitos em qualquer lugar onde
um objeto de opções é aceito (filho de um merge, `extends`, item de
`mixins`): o driver troca o tipo pelo seu `options`.

API:
    - `Component.extend(opts)` → subclasse com `options = merge(cls.options, opts)`
    - `Component.mixin(opts)`  → mescla um mixin global em `cls.options`
    - `Component(opts)`        → instância com `self.options = merge(cls.options, opts, vm=self)`

Limites explícitos:
    - Não executa hooks, não avalia data, não renderiza
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional, Type

from option_merge.core.constants import ASSET_TYPES
from option_merge.core.options.assets import validate_component_name
from option_merge.core.options.merge import OptionMerger
from option_merge.core.options.util import camelize, capitalize


def _base_options() -> Dict[str, Any]:
    return {asset_type + "s": {} for asset_type in ASSET_TYPES}


def _class_name(name: Optional[str]) -> str:
    if name:
        candidate = capitalize(camelize(name))
        if candidate.isidentifier():
            return candidate
    return "Component"


class Component:
    options: ClassVar[Dict[str, Any]] = _base_options()
    super_type: ClassVar[Optional[Type["Component"]]] = None
    extend_options: ClassVar[Mapping[str, Any]] = {}

    def __init__(self, options: Optional[Dict[str, Any]] = None, *, merger: Optional[OptionMerger] = None):
        self.merger = merger or OptionMerger()
        self.options = self.merger.merge(type(self).options, options if options is not None else {}, self)

    @classmethod
    def extend(
        cls,
        extend_options: Optional[Dict[str, Any]] = None,
        *,
        merger: Optional[OptionMerger] = None,
    ) -> Type["Component"]:
        extend_options = extend_options if extend_options is not None else {}
        merger = merger or OptionMerger()

        name = extend_options.get("name") or cls.options.get("name")
        if name and merger.ctx.settings.validate_component_names:
            validate_component_name(name, merger.ctx)

        sub = type(_class_name(name), (cls,), {})
        sub.options = merger.merge(cls.options, extend_options)
        sub.super_type = cls
        sub.extend_options = extend_options

        # auto-registro: permite uso recursivo pelo próprio nome
        if name:
            sub.options["components"][name] = sub
        return sub

    @classmethod
    def mixin(cls, mixin: Any, *, merger: Optional[OptionMerger] = None) -> Type["Component"]:
        cls.options = (merger or OptionMerger()).merge(cls.options, mixin)
        return cls

    def resolve_asset(self, category: str, name: Any, warn_missing: bool = False) -> Any:
        return self.merger.resolve_asset(self.options, category, name, warn_missing)
