# tests/core/options/test_merge_options.py
"""
Testes do driver de merge (`OptionMerger` / `merge_options`).

Os testes asseguram que:
- a ordem efetiva de aplicação é pai → extends → mixins → filho
- o resultado é um dict novo e o pai não é mutado
- mesclar um filho vazio preserva o conteúdo do pai
- tipos de componente são aceitos no lugar de objetos de opções
- nomes inválidos ou reservados em `components` geram aviso, não erro
- settings alteram o comportamento sem alterar estratégias
"""

import pytest

from option_merge.core.config.settings import MergeSettings
from option_merge.core.errors import COMPONENT_INVALID_NAME, COMPONENT_RESERVED_NAME
from option_merge.core.options.context import MergeContext
from option_merge.core.options.merge import OptionMerger, is_component_type, merge_options


def hook(label, calls):
    def fn(*args):
        calls.append(label)
    fn.__name__ = f"hook_{label}"
    return fn


# -----------------------------
# extends / mixins
# -----------------------------

def test_extends_and_mixins_apply_in_order(merger):
    labels = []
    p, e, m1, m2, c = (hook(x, labels) for x in ("P", "E", "M1", "M2", "C"))

    out = merger.merge(
        {"created": [p]},
        {
            "extends": {"created": e},
            "mixins": [{"created": m1}, {"created": m2}],
            "created": c,
        },
    )
    for fn in out["created"]:
        fn()
    assert labels == ["P", "E", "M1", "M2", "C"]


def test_later_mixin_wins_for_default_fields(merger):
    out = merger.merge(
        {"name": "parent"},
        {"mixins": [{"name": "m1", "a": 1}, {"name": "m2"}]},
    )
    assert out["name"] == "m2"
    assert out["a"] == 1


def test_child_beats_mixins_and_extends(merger):
    out = merger.merge({}, {"extends": {"x": "e"}, "mixins": [{"x": "m"}], "x": "c"})
    assert out["x"] == "c"


def test_nested_extends_are_resolved(merger):
    grand = {"methods": {"g": 1}}
    base = {"extends": grand, "methods": {"b": 2}}
    out = merger.merge({}, {"extends": base, "methods": {"c": 3}})
    assert out["methods"] == {"g": 1, "b": 2, "c": 3}


def test_extends_and_mixins_are_carried_as_plain_fields(merger):
    mixins = [{"a": 1}]
    out = merger.merge({}, {"mixins": mixins})
    assert out["mixins"] is mixins


# -----------------------------
# Invariantes do resultado
# -----------------------------

def test_result_is_new_dict_and_parent_untouched(merger):
    parent = {"methods": {"a": 1}, "created": [print]}
    snapshot = {"methods": {"a": 1}, "created": [print]}
    out = merger.merge(parent, {"methods": {"b": 2}, "created": [repr]})

    assert out is not parent
    assert parent == snapshot


def test_merging_empty_child_preserves_parent(merger):
    def producer(vm):
        return {"a": 1}

    parent = {
        "name": "root",
        "created": [print],
        "methods": {"m": print},
        "data": producer,
        "components": {"AppButton": object},
        "watch": {"x": print},
    }
    assert merger.merge(parent, {}) == parent
    assert merger.merge(parent, {})["data"] is producer


def test_each_field_processed_once(ctx):
    seen = []

    def recording(parent_val, child_val, vm, key, ctx):
        seen.append(key)
        return child_val if child_val is not None else parent_val

    merger = OptionMerger(ctx=ctx)
    merger.strategies.set("shared", recording)
    merger.strategies.set("only_parent", recording)
    merger.strategies.set("only_child", recording)
    merger.merge({"shared": 1, "only_parent": 2}, {"shared": 3, "only_child": 4})
    assert sorted(seen) == ["only_child", "only_parent", "shared"]


def test_merge_options_uses_default_merger():
    out = merge_options({"created": [print]}, {"created": repr})
    assert out["created"] == [print, repr]


def test_instance_merge_passes_vm_to_data(merger):
    vm = object()
    received = []

    def data(this):
        received.append(this)
        return {"n": 1}

    out = merger.merge({}, {"data": data}, vm)
    assert out["data"]() == {"n": 1}
    assert received == [vm]


# -----------------------------
# Tipos de componente como filho
# -----------------------------

class FakeType:
    options = {"methods": {"from_type": 1}}


def test_component_type_detection():
    assert is_component_type(FakeType)
    assert not is_component_type(FakeType())
    assert not is_component_type({"options": {}})


def test_component_type_is_replaced_by_its_options(merger):
    out = merger.merge({"methods": {"p": 0}}, FakeType)
    assert out["methods"] == {"p": 0, "from_type": 1}


def test_component_type_in_mixins(merger):
    out = merger.merge({}, {"mixins": [FakeType], "methods": {"own": 2}})
    assert out["methods"] == {"from_type": 1, "own": 2}


# -----------------------------
# Nomes de componentes
# -----------------------------

@pytest.mark.parametrize(
    "name, code",
    [
        ("1bad", COMPONENT_INVALID_NAME),
        ("has space", COMPONENT_INVALID_NAME),
        ("div", COMPONENT_RESERVED_NAME),
        ("slot", COMPONENT_RESERVED_NAME),
        ("Component", COMPONENT_RESERVED_NAME),
    ],
)
def test_bad_component_names_warn(merger, ctx, name, code):
    out = merger.merge({}, {"components": {name: object}})
    assert out["components"][name] is object
    assert [w.type for w in ctx.warnings] == [code]


def test_valid_component_names_are_quiet(merger, ctx):
    merger.merge({}, {"components": {"my-button": object, "AppCard": object}})
    assert ctx.warnings == []


def test_configured_reserved_tags_are_rejected():
    ctx = MergeContext(settings=MergeSettings(reserved_tags=frozenset({"app-shell"})))
    OptionMerger(ctx=ctx).merge({}, {"components": {"app-shell": object}})
    assert [w.type for w in ctx.warnings] == [COMPONENT_RESERVED_NAME]


def test_name_validation_can_be_disabled():
    ctx = MergeContext(settings=MergeSettings(validate_component_names=False))
    OptionMerger(ctx=ctx).merge({}, {"components": {"div": object}})
    assert ctx.warnings == []


def test_silent_merge_records_nothing():
    ctx = MergeContext(settings=MergeSettings(silent=True))
    out = OptionMerger(ctx=ctx).merge({}, {"el": "#app", "components": {"div": object}, "props": 1})
    assert out["el"] == "#app"
    assert out["props"] == {}
    assert ctx.warnings == []
