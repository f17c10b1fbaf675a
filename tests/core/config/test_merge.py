# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de settings.

Os testes asseguram que:
- valores escalares são sobrescritos
- dicionários são mesclados recursivamente
- listas são sobrescritas integralmente
- conflitos de tipo são rejeitados com o caminho da chave
- objetos de entrada não são mutados

Limites explícitos:
    - Não valida carregamento de arquivos (ver test_loader.py)
    - Não se aplica ao merge de opções de componentes
"""

import pytest

try:
    from option_merge.core.config.merge import deep_merge
    from option_merge.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/option_merge/core/config/merge.py (deep_merge)\n"
            "- src/option_merge/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    """
    Verifica o override de escalares sem mutar as entradas.

    Invariantes:
        - Chaves não sobrescritas permanecem inalteradas
        - `base` e `override` não sofrem mutação
    """
    _require_imports()
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = deep_merge(base, override)
    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_dict():
    _require_imports()
    base = {"warnings": {"silent": False}, "components": {"validate_names": True}}
    override = {"warnings": {"silent": True}}
    out = deep_merge(base, override)
    assert out == {"warnings": {"silent": True}, "components": {"validate_names": True}}


def test_merge_list_override_total():
    _require_imports()
    base = {"components": {"reserved_tags": ["app-shell", "app-root"]}}
    override = {"components": {"reserved_tags": ["app-frame"]}}
    out = deep_merge(base, override)
    assert out == {"components": {"reserved_tags": ["app-frame"]}}


def test_merge_does_not_share_nested_objects():
    _require_imports()
    base = {"components": {"reserved_tags": ["x"]}}
    out = deep_merge(base, {})
    out["components"]["reserved_tags"].append("y")
    assert base == {"components": {"reserved_tags": ["x"]}}


def test_none_is_not_a_type_conflict():
    _require_imports()
    assert deep_merge({"a": None}, {"a": 1}) == {"a": 1}
    assert deep_merge({"a": 1}, {"a": None}) == {"a": None}


def test_merge_type_conflict_raises():
    """
    Verifica que conflitos de tipo são rejeitados explicitamente.

    Decisões arquiteturais:
        - Um dicionário não pode ser sobrescrito por um escalar
        - A mensagem identifica a chave pelo caminho pontuado
    """
    _require_imports()
    if ConfigTypeConflictError is None:
        pytest.fail("ConfigTypeConflictError must be defined in errors.py")
    base = {"warnings": {"silent": False}}
    override = {"warnings": {"silent": "yes"}}
    with pytest.raises(ConfigTypeConflictError, match="warnings.silent"):
        deep_merge(base, override)


def test_non_dict_root_raises():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["a"])
