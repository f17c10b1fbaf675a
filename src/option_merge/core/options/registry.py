# src/option_merge/core/options/registry.py
"""
Registry encadeado de assets.

Este módulo define o `AssetRegistry`, a estrutura usada para guardar
assets nomeados (components, directives, filters) e hashes de watchers
depois do merge.

Um registry é composto por:
    - um mapeamento local com os nomes declarados pela própria configuração
    - uma referência opcional ao registry (ou mapping) pai

A resolução de um nome segue a regra "local primeiro, depois o pai",
recursivamente até o fim da cadeia. Isso dá a componentes filhos acesso
aos assets registrados por ancestrais sem copiá-los.

Invariantes:
    - Escritas e remoções afetam apenas o mapeamento local
    - `len()` e iteração enxergam apenas as entradas locais
    - Leitura (`[]`, `get`, `in`) enxerga a cadeia inteira
    - Igualdade compara o conteúdo visível (cadeia achatada)

Limites explícitos:
    - Não valida nomes de assets
    - Não normaliza grafias (camelCase/PascalCase é papel do resolver)
    - Não detecta ciclos na cadeia de pais
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, MutableMapping, Optional


class AssetRegistry(MutableMapping[str, Any]):
    """Mapeamento local com delegação explícita para um pai."""

    def __init__(
        self,
        entries: Optional[Mapping[str, Any]] = None,
        parent: Optional[Mapping[str, Any]] = None,
    ):
        self._local: Dict[str, Any] = dict(entries or {})
        self.parent: Optional[Mapping[str, Any]] = parent

    # -----------------------------
    # MutableMapping
    # -----------------------------
    def __getitem__(self, key: str) -> Any:
        if key in self._local:
            return self._local[key]
        if self.parent is not None:
            return self.parent[key]
        raise KeyError(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._local[key] = value

    def __delitem__(self, key: str) -> None:
        del self._local[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._local)

    def __len__(self) -> int:
        return len(self._local)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AssetRegistry):
            return self.flatten() == other.flatten()
        if isinstance(other, Mapping):
            return self.flatten() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AssetRegistry({self._local!r}, parent={self.parent!r})"

    # -----------------------------
    # Cadeia de ancestrais
    # -----------------------------
    def has_own(self, key: str) -> bool:
        return key in self._local

    def lookup(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def chain(self) -> List[Mapping[str, Any]]:
        """Lista [self, pai, avô, ...] na ordem de resolução."""
        out: List[Mapping[str, Any]] = []
        node: Optional[Mapping[str, Any]] = self
        while node is not None:
            out.append(node)
            node = node.parent if isinstance(node, AssetRegistry) else None
        return out

    def flatten(self) -> Dict[str, Any]:
        """Conteúdo visível como dict simples; entradas locais vencem."""
        flat: Dict[str, Any] = {}
        for node in reversed(self.chain()):
            own = node._local if isinstance(node, AssetRegistry) else node
            flat.update(own)
        return flat
