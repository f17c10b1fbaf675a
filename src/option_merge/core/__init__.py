# src/option_merge/core/__init__.py
"""
Core do option_merge.

Componentes principais:
    - config     → settings do motor e carregamento de arquivos YAML/JSON
    - options    → estratégias, normalizadores, driver de merge e resolver de assets
    - component  → tipos de componente construtíveis (extend / mixin / instância)
    - errors     → catálogo tipado de avisos
    - constants  → hooks de ciclo de vida, categorias de assets, tags reservadas

Limites explícitos:
    - Não executa as opções mescladas
    - Não implementa reatividade
"""
