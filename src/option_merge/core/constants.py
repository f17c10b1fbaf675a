# src/option_merge/core/constants.py
"""
Constantes canônicas de opções.

Este módulo concentra as listas de nomes consumidas pelo merge de opções:
    - nomes de hooks de ciclo de vida (mesclados como listas)
    - categorias de assets (cada uma vira o campo `<categoria>s`)
    - nomes reservados que não podem ser usados como nome de componente

As listas são tuplas/frozensets imutáveis. A extensão de nomes reservados
é feita via `MergeSettings.reserved_tags`, nunca alterando este módulo.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple


ASSET_TYPES: Tuple[str, ...] = (
    "component",
    "directive",
    "filter",
)

LIFECYCLE_HOOKS: Tuple[str, ...] = (
    "beforeCreate",
    "created",
    "beforeMount",
    "mounted",
    "beforeUpdate",
    "updated",
    "beforeDestroy",
    "destroyed",
    "activated",
    "deactivated",
    "errorCaptured",
)

# Campos que só fazem sentido na criação de uma instância.
RESTRICTED_OPTIONS: Tuple[str, ...] = ("el", "propsData")

BUILT_IN_TAGS: FrozenSet[str] = frozenset({"slot", "component"})

HTML_TAGS: FrozenSet[str] = frozenset(
    """
    html body base head link meta style title address article aside footer
    header h1 h2 h3 h4 h5 h6 hgroup nav section div dd dl dt figcaption
    figure picture hr img li main ol p pre ul a b abbr bdi bdo br cite code
    data dfn em i kbd mark q rp rt rtc ruby s samp small span strong sub sup
    time u var wbr area audio map track video embed object param source
    canvas script noscript del ins caption col colgroup table thead tbody td
    th tr button datalist fieldset form input label legend meter optgroup
    option output progress select textarea details dialog menu menuitem
    summary content element shadow template blockquote iframe tfoot
    """.split()
)

SVG_TAGS: FrozenSet[str] = frozenset(
    """
    svg animate circle clippath cursor defs desc ellipse filter font-face
    foreignObject g glyph image line marker mask missing-glyph path pattern
    polygon polyline rect switch symbol text textpath tspan use view
    """.split()
)


# Hosts que expõem um atributo `watch` nativo podem vazá-lo como valor da
# opção; o merge de watchers trata este marcador como ausente.
NATIVE_WATCH: object = object()
