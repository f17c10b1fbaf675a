# tests/conftest.py
"""
Fixtures compartilhados para testes do option_merge.

Este módulo define fixtures reutilizáveis que fornecem:
- um sink de avisos que grava as chamadas recebidas
- um `MergeContext` isolado por teste
- um `OptionMerger` com registry padrão ligado a esse contexto
- conteúdos YAML de settings para os testes do loader

Decisões arquiteturais:
    - Cada teste recebe seu próprio contexto (avisos não vazam entre testes)
    - Imports do pacote são feitos de forma lazy dentro das fixtures

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture altera estado global (ex.: `Component.options`)
"""

import pytest


@pytest.fixture
def sink_calls():
    """Lista onde o sink grava tuplas `(message, context)`."""
    return []


@pytest.fixture
def ctx(sink_calls):
    from option_merge.core.options.context import MergeContext

    def sink(message, context=None):
        sink_calls.append((message, context))

    return MergeContext(sink=sink)


@pytest.fixture
def merger(ctx):
    """
    Fixture que fornece um `OptionMerger` com o registry padrão (v1).

    O merger compartilha o `ctx` da fixture homônima, de modo que os
    testes podem inspecionar `ctx.warnings` e `sink_calls` após o merge.
    """
    from option_merge.core.options.merge import OptionMerger

    return OptionMerger(ctx=ctx)


@pytest.fixture
def settings_yaml() -> str:
    return """\
warnings:
  silent: false
components:
  validate_names: true
  reserved_tags:
    - app-shell
"""


@pytest.fixture
def settings_local_yaml() -> str:
    return """\
warnings:
  silent: true
"""
