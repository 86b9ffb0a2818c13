# src/atlas_compose/core/__init__.py
"""
Core do Atlas Compose.

Este pacote contém a implementação canônica e independente de
ferramenta de build do motor de composição de plugins de configuração.

Componentes principais:
    - config       → deep-merge, hashing e carregamento de arquivos
    - plugin       → contrato de plugin, contexto imutável e registry
    - engine       → Composer (redução ordenada e fail-fast)
    - traceability → trace de diagnóstico da composição

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Composição síncrona, pura e sem estado entre invocações

Limites explícitos:
    - Não conhece o schema de nenhuma ferramenta de build
    - Não define plugins de defaults (ver `atlas_compose.integrations`)
"""
