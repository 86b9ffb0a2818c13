# src/atlas_compose/core/engine/__init__.py
"""
Engine do Atlas Compose.

Este pacote contém o Composer: a redução genérica que encadeia plugins
de configuração em um único plugin equivalente.

Componentes principais:
    - composer → `compose_plugins`, `create_compose_plugins`, `ComposedPlugin`

Princípios fundamentais:
    - A ordem de aplicação é exatamente a ordem declarada
    - A primeira falha aborta a composição (fail-fast)
    - Nenhuma decisão silenciosa é tomada durante a redução

Limites explícitos:
    - Não define plugins de domínio (ver `atlas_compose.integrations`)
    - Não realiza I/O nem cache
"""
