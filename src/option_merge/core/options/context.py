# src/option_merge/core/options/context.py
"""
Contexto explícito de uma operação de merge de opções.

Este módulo define o `MergeContext`, a estrutura passada a todas as
estratégias, normalizadores e ao resolver de assets. Ele substitui
estado global por colaboradores explícitos:

    - sink de avisos externo (`warn(message, context)`), opcional
    - setter reativo (`set(target, key, value)`) usado no merge profundo de data
    - settings do motor (`MergeSettings`)

Além de encaminhar avisos ao sink, o contexto mantém:
    - `warnings`: avisos tipados (`MergeWarning`) na ordem de emissão
    - `events`: eventos de log estruturados (level, message, timestamp, extras)

Invariantes:
    - Avisos nunca alteram o fluxo do merge
    - Com `settings.silent`, nenhum aviso é registrado nem encaminhado
    - Eventos incluem sempre `level`, `message` e `timestamp`

Limites explícitos:
    - Não implementa reatividade; apenas delega ao setter configurado
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, MutableMapping, Optional

from option_merge.core.config.settings import MergeSettings
from option_merge.core.errors import GENERIC_WARNING, MergeWarning


WarningSink = Callable[..., None]
ReactiveSetter = Callable[[MutableMapping[str, Any], str, Any], None]


def plain_set(target: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Setter padrão: atribuição direta, sem rastreamento reativo."""
    target[key] = value


def describe_context(context: Any) -> Optional[str]:
    """Nome legível de uma configuração ou instância para anexar a avisos."""
    if context is None:
        return None
    options = context if isinstance(context, Mapping) else getattr(context, "options", None)
    if isinstance(options, Mapping):
        name = options.get("name")
        if isinstance(name, str) and name:
            return name
    if isinstance(context, Mapping):
        return "<options>"
    return type(context).__name__


@dataclass
class MergeContext:
    settings: MergeSettings = field(default_factory=MergeSettings)
    setter: ReactiveSetter = plain_set
    sink: Optional[WarningSink] = None

    warnings: List[MergeWarning] = field(default_factory=list, init=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def report(self, warning: MergeWarning, context: Any = None) -> None:
        if self.settings.silent:
            return
        if warning.context is None and context is not None:
            warning = replace(warning, context=describe_context(context))
        self.warnings.append(warning)
        self.log(
            level="WARNING",
            message=warning.message,
            code=warning.type,
            context=warning.context,
            details=dict(warning.details),
        )
        if self.sink is not None:
            self.sink(warning.message, context)

    def warn(self, message: str, context: Any = None) -> None:
        self.report(MergeWarning(type=GENERIC_WARNING, message=message), context)

    def warnings_of(self, code: str) -> List[MergeWarning]:
        return [w for w in self.warnings if w.type == code]

    # -----------------------------
    # Reactive setter
    # -----------------------------
    def set(self, target: MutableMapping[str, Any], key: str, value: Any) -> None:
        self.setter(target, key, value)
