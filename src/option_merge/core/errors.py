"""
Option Merge — Canonical Warning Structures (v1)

Este módulo define o padrão canônico de avisos do merge de opções.

No merge de opções, nenhuma anomalia é fatal: formatos inválidos, nomes
conflitantes e uso indevido de campos restritos são reportados como
avisos tipados e o merge segue com um resultado utilizável.

Avisos devem ser:

- explícitos
- serializáveis
- rastreáveis até a opção que os gerou

Nenhum aviso interrompe o merge.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MergeWarning:
    """
    Payload canônico de aviso do merge de opções.

    Campos:
    - type: código estável do aviso (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida a quem escreveu a configuração
    - context: nome legível da configuração/instância envolvida, se houver
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None
    context: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do aviso."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de aviso (v1)
# ---------------------------------------------------------------------------

# Formato de opções
OPTION_INVALID_TYPE = "OPTION_INVALID_TYPE"
PROPS_INVALID_ARRAY_ITEM = "PROPS_INVALID_ARRAY_ITEM"
OPTION_RESTRICTED = "OPTION_RESTRICTED"
DATA_NOT_FUNCTION = "DATA_NOT_FUNCTION"

# Nomes de componentes
COMPONENT_INVALID_NAME = "COMPONENT_INVALID_NAME"
COMPONENT_RESERVED_NAME = "COMPONENT_RESERVED_NAME"

# Resolução de assets
ASSET_UNRESOLVED = "ASSET_UNRESOLVED"

# Avisos livres emitidos via `warn(message, context)`
GENERIC_WARNING = "GENERIC_WARNING"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def option_invalid_type(*, option: str, expected: str, actual: str) -> MergeWarning:
    return MergeWarning(
        type=OPTION_INVALID_TYPE,
        message=(
            f'Invalid value for option "{option}": expected {expected}, '
            f"but got {actual}."
        ),
        details={"option": option, "expected": expected, "actual": actual},
        hint=f'Declare "{option}" using one of the accepted shapes.',
    )


def props_invalid_array_item(*, item_type: str) -> MergeWarning:
    return MergeWarning(
        type=PROPS_INVALID_ARRAY_ITEM,
        message="props must be strings when using array syntax.",
        details={"option": "props", "item_type": item_type},
        hint="Use prop names (str) in the list form, or switch to the mapping form.",
    )


def option_restricted(*, option: str) -> MergeWarning:
    return MergeWarning(
        type=OPTION_RESTRICTED,
        message=(
            f'option "{option}" can only be used during instance '
            "creation."
        ),
        details={"option": option},
        hint=f'Pass "{option}" when constructing an instance, not in a component definition.',
    )


def data_not_function(*, option: str = "data") -> MergeWarning:
    return MergeWarning(
        type=DATA_NOT_FUNCTION,
        message=(
            f'The "{option}" option should be a function '
            "that returns a per-instance value in component definitions."
        ),
        details={"option": option},
        hint="Wrap the value in a producer callable so each instance gets its own copy.",
    )


def component_invalid_name(*, name: str) -> MergeWarning:
    return MergeWarning(
        type=COMPONENT_INVALID_NAME,
        message=(
            f'Invalid component name: "{name}". Component names '
            "can only contain alphanumeric characters and the hyphen, "
            "and must start with a letter."
        ),
        details={"name": name},
    )


def component_reserved_name(*, name: str) -> MergeWarning:
    return MergeWarning(
        type=COMPONENT_RESERVED_NAME,
        message=(
            "Do not use built-in or reserved HTML elements as component "
            f"id: {name}"
        ),
        details={"name": name},
    )


def asset_unresolved(*, category: str, name: str) -> MergeWarning:
    singular = category[:-1] if category.endswith("s") else category
    return MergeWarning(
        type=ASSET_UNRESOLVED,
        message=f"Failed to resolve {singular}: {name}",
        details={"category": category, "name": name},
        hint=f"Register the {singular} locally or on an ancestor configuration.",
    )
