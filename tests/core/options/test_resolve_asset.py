import pytest

from option_merge.core.errors import ASSET_UNRESOLVED
from option_merge.core.options.assets import resolve_asset, validate_component_name
from option_merge.core.options.registry import AssetRegistry


class Button:
    pass


class Fallback:
    pass


@pytest.mark.parametrize("registered", ["my-button", "myButton", "MyButton"])
def test_resolves_any_registered_spelling(registered):
    options = {"components": {registered: Button}}
    assert resolve_asset(options, "components", "my-button") is Button


def test_exact_spelling_wins_over_variants():
    options = {"components": {"my-button": Button, "MyButton": Fallback}}
    assert resolve_asset(options, "components", "my-button") is Button


def test_inherited_assets_are_found():
    options = {"components": AssetRegistry(parent={"MyButton": Button})}
    assert resolve_asset(options, "components", "my-button") is Button


def test_local_variant_beats_inherited_exact():
    registry = AssetRegistry({"MyButton": Fallback}, parent={"my-button": Button})
    options = {"components": registry}
    assert resolve_asset(options, "components", "my-button") is Fallback


def test_non_string_id_returns_none(ctx):
    assert resolve_asset({"components": {"1": Button}}, "components", 1, True, ctx=ctx) is None
    assert ctx.warnings == []


def test_missing_category_returns_none():
    assert resolve_asset({}, "filters", "upper") is None


def test_missing_asset_warns_only_when_asked(ctx, sink_calls):
    options = {"name": "host", "filters": {}}
    assert resolve_asset(options, "filters", "upper", ctx=ctx) is None
    assert ctx.warnings == []

    assert resolve_asset(options, "filters", "upper", True, ctx=ctx) is None
    assert [w.type for w in ctx.warnings] == [ASSET_UNRESOLVED]
    assert ctx.warnings[0].message == "Failed to resolve filter: upper"
    assert ctx.warnings[0].context == "host"
    assert sink_calls[0][1] is options


def test_merger_resolve_asset_uses_its_context(merger, ctx):
    merged = merger.merge({"directives": {"focus": {"bind": print}}}, {})
    assert merger.resolve_asset(merged, "directives", "focus") == {"bind": print}
    assert merger.resolve_asset(merged, "directives", "blur", True) is None
    assert len(ctx.warnings) == 1


def test_validate_component_name_reports_result(ctx):
    assert validate_component_name("my-comp", ctx)
    assert not validate_component_name("-leading", ctx)
    assert not validate_component_name("svg", ctx)
    assert len(ctx.warnings) == 2


_SPELLINGS = {"my-button": "exact", "myButton": "camel", "MyButton": "pascal"}


@pytest.mark.parametrize(
    "removed, expected",
    [
        (None, "exact"),
        ("my-button", "camel"),
        ("myButton", "exact"),
        ("MyButton", "exact"),
    ],
)
def test_spelling_priority_with_all_variants(removed, expected):
    registered = {k: v for k, v in _SPELLINGS.items() if k != removed}
    assert resolve_asset({"components": registered}, "components", "my-button") == expected


def test_camel_beats_pascal():
    options = {"components": {"MyButton": Fallback, "myButton": Button}}
    assert resolve_asset(options, "components", "my-button") is Button


def test_local_camel_beats_inherited_exact():
    registry = AssetRegistry({"myButton": Fallback}, parent={"my-button": Button})
    assert resolve_asset({"components": registry}, "components", "my-button") is Fallback


def test_inherited_spellings_follow_same_priority():
    parent = AssetRegistry({"myButton": Fallback, "MyButton": Button})
    registry = AssetRegistry(parent=parent)
    assert resolve_asset({"components": registry}, "components", "my-button") is Fallback


def test_missing_asset_without_context_returns_none():
    assert resolve_asset({"filters": {}}, "filters", "upper", True) is None
