# src/option_merge/core/config/__init__.py

"""
Camada de configuração do merge de opções.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar e validar estruturalmente as configurações do próprio motor de
merge (`MergeSettings`) e os arquivos declarativos de opções que podem ser
usados como mixins ou `extends`.

Responsabilidades do pacote:
    - Carregamento de arquivos YAML/JSON (defaults embutidos + overrides)
    - Resolução dos settings finais via deep-merge tipado
    - Validação estrutural dos valores de settings

Princípios fundamentais:
    - Erros estruturais de arquivos são falhas fatais (ao contrário do
      merge de opções, onde tudo é aviso)
    - A mesma entrada sempre produz os mesmos settings

Limites explícitos:
    - Não executa merge de opções
    - Não registra estratégias
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidSettingError,
    SettingsNotFoundError,
    UnsupportedConfigFormatError,
)
from .loader import load_options_file, load_settings
from .merge import deep_merge
from .settings import DEFAULT_SETTINGS, MergeSettings

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "InvalidSettingError",
    "SettingsNotFoundError",
    "UnsupportedConfigFormatError",
    "DEFAULT_SETTINGS",
    "MergeSettings",
    "deep_merge",
    "load_options_file",
    "load_settings",
]
