# src/option_merge/core/options/normalize.py
"""
Normalizadores de sintaxes abreviadas de opções.

Cada normalizador reescreve, no próprio objeto de opções do filho, um
campo que aceita mais de uma sintaxe equivalente:

    props       → {nomeCamel: {"type": ..., ...}}
    inject      → {nomeLocal: {"from": origem, ...}}
    directives  → {nome: {"bind": fn, "update": fn, ...}}

Os normalizadores rodam uma vez por chamada de merge, antes da leitura
dos campos. Formatos inválidos geram aviso e o campo fica na forma
normalizada vazia (ou inalterado, no caso de directives).

Normalizar um valor já normalizado não o altera.
"""

from __future__ import annotations

from typing import Any, Dict, MutableMapping

from option_merge.core.errors import option_invalid_type, props_invalid_array_item

from .context import MergeContext
from .util import camelize, is_plain_object, to_raw_type


def normalize_props(options: MutableMapping[str, Any], vm: Any, ctx: MergeContext) -> None:
    props = options.get("props")
    if props is None:
        return
    res: Dict[str, Any] = {}
    if isinstance(props, (list, tuple)):
        for val in props:
            if isinstance(val, str):
                res[camelize(val)] = {"type": None}
            else:
                ctx.report(props_invalid_array_item(item_type=to_raw_type(val)), vm)
    elif is_plain_object(props):
        for key, val in props.items():
            res[camelize(key)] = val if is_plain_object(val) else {"type": val}
    else:
        ctx.report(
            option_invalid_type(option="props", expected="an Array or an Object", actual=to_raw_type(props)),
            vm,
        )
    options["props"] = res


def normalize_inject(options: MutableMapping[str, Any], vm: Any, ctx: MergeContext) -> None:
    inject = options.get("inject")
    if inject is None:
        return
    normalized: Dict[str, Any] = {}
    options["inject"] = normalized
    if isinstance(inject, (list, tuple)):
        for name in inject:
            normalized[name] = {"from": name}
    elif is_plain_object(inject):
        for key, val in inject.items():
            normalized[key] = {"from": key, **val} if is_plain_object(val) else {"from": val}
    else:
        ctx.report(
            option_invalid_type(option="inject", expected="an Array or an Object", actual=to_raw_type(inject)),
            vm,
        )


def normalize_directives(options: MutableMapping[str, Any]) -> None:
    dirs = options.get("directives")
    if not dirs or not is_plain_object(dirs):
        return
    for key, definition in list(dirs.items()):
        if callable(definition):
            dirs[key] = {"bind": definition, "update": definition}
