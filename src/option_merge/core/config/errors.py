# src/option_merge/core/config/errors.py
"""
Exceções canônicas da camada de configuração.

As exceções aqui definidas representam falhas estruturais ao carregar ou
resolver settings e arquivos de opções. Elas não se aplicam ao merge de
opções em si, que nunca levanta exceções por formato inválido.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
"""


class ConfigError(Exception):
    """Exceção base para erros de carregamento/resolução de configuração."""


class SettingsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração explicitamente
    informado não existe.

    Decisões arquiteturais:
        - Um caminho explícito que não existe é erro, não fallback silencioso
        - O override local opcional é a única exceção a esta regra
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Exceção levantada quando a raiz do arquivo não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"warnings": {"silent": false}}
        - override: {"warnings": "off"}
    """


class InvalidSettingError(ConfigError):
    """Exceção levantada quando um valor de setting tem tipo inválido."""
