# src/option_merge/core/config/loader.py
"""
Loader de settings e de arquivos declarativos de opções.

Settings são resolvidos a partir de:
    - `DEFAULT_SETTINGS` (embutido, sempre presente)
    - um arquivo de settings (opcional; se informado, deve existir)
    - um arquivo local de overrides (opcional; ignorado se não existir)

Arquivos de opções (`load_options_file`) carregam uma configuração
declarativa (props, inject, nomes de watchers, data simples) que pode ser
passada a `merge_options` como filho, mixin ou `extends`.

Invariantes:
    - O resultado de `_load_file` é sempre um dicionário
    - Overrides nunca mutam os defaults
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union
import json

import yaml  # PyYAML

from .merge import deep_merge
from .settings import DEFAULT_SETTINGS, MergeSettings
from .errors import (
    InvalidConfigRootTypeError,
    SettingsNotFoundError,
    UnsupportedConfigFormatError,
)


PathLike = Union[str, Path]


def _parse_json(text: str) -> Any:
    # JSON vazio não é válido; tratado como "sem conteúdo", como no YAML
    return json.loads(text) if text.strip() else None


# sufixo (minúsculo) → parser de texto
_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": _parse_json,
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de settings/opções e devolve seu conteúdo como dict.

    O parser é escolhido pelo sufixo em `_PARSERS`; conteúdo vazio vira
    `{}`.

    Raises:
        SettingsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o sufixo não tiver parser.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(
            f"Unsupported format '{path.suffix}' for {path} "
            f"(expected one of: {', '.join(sorted(_PARSERS))})"
        )
    if not path.is_file():
        raise SettingsNotFoundError(f"Configuration file not found: {path}")

    content = parser(path.read_text(encoding="utf-8"))
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise InvalidConfigRootTypeError(
            f"{path.name}: root must be a mapping, got: {type(content).__name__}"
        )
    return content


def load_settings(
    path: Optional[PathLike] = None,
    *,
    local_path: Optional[PathLike] = None,
) -> MergeSettings:
    """
    Resolve os `MergeSettings` efetivos.

    Política de resolução:
        - `DEFAULT_SETTINGS` é sempre a base
        - `path`, quando informado, é obrigatório e aplicado sobre a base
        - `local_path`, quando existir, é aplicado por último

    Raises:
        SettingsNotFoundError: Se `path` for informado e não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito de tipo no merge.
        InvalidSettingError: Se um valor final tiver tipo inválido.
    """
    effective: Dict[str, Any] = DEFAULT_SETTINGS

    if path is not None:
        effective = deep_merge(effective, _load_file(Path(path)))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return MergeSettings.from_dict(effective)


def load_options_file(path: PathLike) -> Dict[str, Any]:
    """Carrega uma configuração declarativa de opções de um arquivo YAML/JSON."""
    return _load_file(Path(path))
