# src/option_merge/core/options/strategies.py
"""
Estratégias de merge por campo e o registry que as despacha.

Uma estratégia decide como combinar o valor do pai e o valor do filho
para um único campo de opções:

    strategy(parent_val, child_val, vm=None, key=None) -> merged

    - vm:  instância em criação, ou None em merges de definição (extend)
    - key: nome do campo sendo mesclado

As estratégias embutidas aceitam um quinto argumento posicional, `ctx`
(`MergeContext`: avisos + setter reativo). O registry só repassa `ctx` a
estratégias que aceitam cinco posicionais (ou `*args`); as demais
recebem apenas os argumentos que declaram.

Política (v1):
    - campo sem estratégia registrada → `default_strategy` (filho vence se não for None)
    - el / propsData                  → restritos a instâncias (aviso), depois default
    - data                            → producer mesclado (merge profundo ao invocar)
    - provide                         → mesmo merge de producers de `data`
    - hooks de ciclo de vida          → listas concatenadas, pai antes do filho
    - components/directives/filters   → `AssetRegistry` encadeado ao registry do pai
    - watch                           → listas de callbacks por nome, pai antes do filho
    - props/methods/inject/computed   → dict novo, filho sobrescreve pai

Invariantes:
    - Nenhuma estratégia muta `parent_val`
    - Nenhuma estratégia levanta exceção por formato inválido; avisa e segue
    - O valor None representa "não definido" em ambos os lados

Extensão:
    `StrategyRegistry.set(campo, estrategia)` registra ou substitui uma
    estratégia antes de qualquer merge. O registry não deve ser alterado
    durante um merge em andamento.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from option_merge.core.constants import ASSET_TYPES, LIFECYCLE_HOOKS, NATIVE_WATCH, RESTRICTED_OPTIONS
from option_merge.core.errors import data_not_function, option_invalid_type, option_restricted

from .context import MergeContext
from .registry import AssetRegistry
from .util import as_list, extend, entries, is_plain_object, positional_arity, to_raw_type


Strategy = Callable[[Any, Any, Optional[Any], str, MergeContext], Any]


# ---------------------------------------------------------------------------
# Default
# ---------------------------------------------------------------------------

def default_strategy(parent_val: Any, child_val: Any, vm: Any = None, key: Optional[str] = None, ctx: Any = None) -> Any:
    """Filho vence, a menos que não esteja definido."""
    return parent_val if child_val is None else child_val


# ---------------------------------------------------------------------------
# Campos restritos
# ---------------------------------------------------------------------------

def merge_restricted(parent_val: Any, child_val: Any, vm: Any, key: str, ctx: MergeContext) -> Any:
    """
    Campos que só fazem sentido na criação de uma instância (`el`, `propsData`).

    Sem instância, o uso é reportado (`OPTION_RESTRICTED`); o valor segue
    a estratégia default em qualquer caso.
    """
    if vm is None:
        ctx.report(option_restricted(option=key))
    return default_strategy(parent_val, child_val)


# ---------------------------------------------------------------------------
# Data / provide
# ---------------------------------------------------------------------------

def merge_data(to: Any, from_: Any, ctx: MergeContext) -> Any:
    """
    Mescla `from_` dentro de `to` (mutando `to`) e retorna `to`.

    - chave ausente em `to` → introduzida via `ctx.set` (setter reativo)
    - ambos os lados objetos simples → recursão
    - demais colisões → `to` mantém seu valor
    """
    if not from_:
        return to
    for key, from_val in list(from_.items()):
        if key not in to:
            ctx.set(to, key, from_val)
            continue
        to_val = to[key]
        if is_plain_object(to_val) and is_plain_object(from_val):
            merge_data(to_val, from_val, ctx)
    return to


def _as_producer(value: Any) -> Callable[[Any], Any]:
    """
    Adapta um valor de `data`/`provide` para a forma `produce(vm)`.

    - callable sem parâmetros posicionais → chamado sem argumentos
    - demais callables                    → chamados com a instância (ou None)
    - valores literais                    → copiados a cada chamada
    """
    if not callable(value):
        def produce_literal(vm: Any) -> Any:
            return deepcopy(value)

        return produce_literal

    if positional_arity(value) == 0:
        def produce_unbound(vm: Any) -> Any:
            return value()

        return produce_unbound

    return value


def merge_data_or_fn(parent_val: Any, child_val: Any, vm: Any, ctx: MergeContext) -> Any:
    """
    Combina dois valores de `data`/`provide` em um producer.

    Os lados podem ser literais, producers sem argumentos ou producers que
    recebem a instância (ou None). A assinatura de cada lado é inspecionada
    uma vez, aqui; o producer resultante retorna um dict novo a cada chamada.

    Invariantes:
        - Exceções levantadas pelos producers propagam sem tratamento
    """
    if vm is None:
        if child_val is None:
            return parent_val
        if parent_val is None:
            return child_val

        produce_child = _as_producer(child_val)
        produce_parent = _as_producer(parent_val)

        def merged_data_fn(this: Any = None) -> Any:
            child_data = produce_child(this)
            parent_data = produce_parent(this)
            if child_data is None:
                return parent_data
            return merge_data(child_data, parent_data, ctx)

        return merged_data_fn

    produce_instance = _as_producer(child_val)
    produce_default = _as_producer(parent_val)

    def merged_instance_data_fn(this: Any = None) -> Any:
        instance_data = produce_instance(vm)
        default_data = produce_default(vm)
        if instance_data is not None:
            return merge_data(instance_data, default_data, ctx)
        return default_data

    return merged_instance_data_fn


def merge_data_option(parent_val: Any, child_val: Any, vm: Any, key: str, ctx: MergeContext) -> Any:
    if vm is None:
        if child_val is not None and not callable(child_val):
            ctx.report(data_not_function(option=key))
            return parent_val
        return merge_data_or_fn(parent_val, child_val, None, ctx)
    return merge_data_or_fn(parent_val, child_val, vm, ctx)


def merge_provide(parent_val: Any, child_val: Any, vm: Any, key: str, ctx: MergeContext) -> Any:
    return merge_data_or_fn(parent_val, child_val, vm, ctx)


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------

def merge_hook(parent_val: Any, child_val: Any, vm: Any = None, key: Optional[str] = None, ctx: Any = None) -> Any:
    if child_val is None:
        return parent_val
    if parent_val is None:
        return as_list(child_val)
    return as_list(parent_val) + as_list(child_val)


# ---------------------------------------------------------------------------
# Assets
# ---------------------------------------------------------------------------

def assert_object_type(name: str, value: Any, vm: Any, ctx: MergeContext) -> bool:
    if is_plain_object(value):
        return True
    ctx.report(
        option_invalid_type(option=name, expected="an Object", actual=to_raw_type(value)),
        vm,
    )
    return False


def merge_assets(parent_val: Any, child_val: Any, vm: Any, key: str, ctx: MergeContext) -> AssetRegistry:
    """
    Registry de assets encadeado ao registry do pai.

    Os assets do pai não são copiados: ficam visíveis pela cadeia. As
    entradas do filho são copiadas para o mapeamento local e vencem as
    herdadas. Um filho que não é objeto é reportado e ignorado.
    """
    res = AssetRegistry(parent=parent_val)
    if child_val is not None and assert_object_type(key, child_val, vm, ctx):
        extend(res, child_val)
    return res


# ---------------------------------------------------------------------------
# Watchers
# ---------------------------------------------------------------------------

def merge_watch(parent_val: Any, child_val: Any, vm: Any, key: str, ctx: MergeContext) -> Any:
    """
    Watchers por nome, concatenados com os do pai primeiro.

    Decisões arquiteturais:
        - `NATIVE_WATCH` conta como ausente em ambos os lados
        - Filho ausente (ou inválido) → registry vazio encadeado ao pai
        - Pai ausente → filho inalterado

    Invariantes:
        - Listas do pai nunca são mutadas; o resultado é um dict novo
    """
    if parent_val is NATIVE_WATCH:
        parent_val = None
    if child_val is NATIVE_WATCH:
        child_val = None

    if child_val is None:
        return AssetRegistry(parent=parent_val)
    if not assert_object_type(key, child_val, vm, ctx):
        return AssetRegistry(parent=parent_val)
    if parent_val is None:
        return child_val

    ret: Dict[str, Any] = {}
    extend(ret, parent_val)
    for name, child in entries(child_val):
        parent = ret.get(name)
        if parent is not None:
            ret[name] = as_list(parent) + as_list(child)
        else:
            ret[name] = as_list(child)
    return ret


# ---------------------------------------------------------------------------
# Hashes simples (props, methods, inject, computed)
# ---------------------------------------------------------------------------

def merge_object_hash(parent_val: Any, child_val: Any, vm: Any, key: str, ctx: MergeContext) -> Any:
    """props / methods / inject / computed: dict novo com o filho sobre o pai."""
    child_ok = child_val is None or assert_object_type(key, child_val, vm, ctx)
    if parent_val is None:
        return child_val
    ret: Dict[str, Any] = {}
    extend(ret, parent_val)
    if child_val is not None and child_ok:
        extend(ret, child_val)
    return ret


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def _bind_strategy(strategy: Strategy) -> Strategy:
    """
    Adapta uma estratégia à chamada de cinco argumentos feita pelo driver.

    Estratégias que aceitam cinco posicionais (ou `*args`) recebem `ctx`;
    as que declaram menos recebem só os primeiros argumentos
    `(parent_val, child_val, vm, key)` que aceitam.
    """
    arity = positional_arity(strategy)
    if arity is None or arity >= 5:
        return strategy

    def bound(parent_val: Any, child_val: Any, vm: Any, key: str, ctx: MergeContext) -> Any:
        return strategy(*(parent_val, child_val, vm, key)[:arity])

    return bound


class StrategyRegistry:
    """
    Tabela explícita campo → estratégia, com fallback para a default.

    Extensibilidade é explícita: novos campos são registrados via `set()`.
    `StrategyRegistry.default()` é o passo de população padrão.

    Decisões arquiteturais:
        - `get()` devolve a estratégia como foi registrada
        - `resolve()` devolve a forma chamável pelo driver com
          `(parent_val, child_val, vm, key, ctx)`
    """

    def __init__(
        self,
        strategies: Optional[Mapping[str, Strategy]] = None,
        fallback: Strategy = default_strategy,
    ):
        self._strategies: Dict[str, Strategy] = {}
        self._bound: Dict[str, Strategy] = {}
        self.fallback: Strategy = fallback
        self._bound_fallback: Strategy = _bind_strategy(fallback)
        if strategies:
            for key, strategy in strategies.items():
                self.set(key, strategy)

    @classmethod
    def default(cls) -> "StrategyRegistry":
        return cls(strategies=_default_strategies_v1())

    def set(self, key: str, strategy: Strategy) -> None:
        if not isinstance(key, str) or not key.strip():
            raise ValueError("strategy key must be a non-empty string")
        if not callable(strategy):
            raise TypeError("strategy must be callable")
        self._strategies[key] = strategy
        self._bound[key] = _bind_strategy(strategy)

    def get(self, key: str) -> Optional[Strategy]:
        return self._strategies.get(key)

    def resolve(self, key: str) -> Strategy:
        return self._bound.get(key) or self._bound_fallback

    def copy(self) -> "StrategyRegistry":
        return StrategyRegistry(strategies=self._strategies, fallback=self.fallback)

    def keys(self) -> Iterator[str]:
        return iter(self._strategies)

    def __contains__(self, key: object) -> bool:
        return key in self._strategies


def _default_strategies_v1() -> Dict[str, Strategy]:
    table: Dict[str, Strategy] = {}

    for option in RESTRICTED_OPTIONS:
        table[option] = merge_restricted

    table["data"] = merge_data_option

    for hook in LIFECYCLE_HOOKS:
        table[hook] = merge_hook

    for asset_type in ASSET_TYPES:
        table[asset_type + "s"] = merge_assets

    table["watch"] = merge_watch

    for option in ("props", "methods", "inject", "computed"):
        table[option] = merge_object_hash

    table["provide"] = merge_provide

    return table
