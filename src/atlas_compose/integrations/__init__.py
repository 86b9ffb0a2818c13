# src/atlas_compose/integrations/__init__.py
"""
Integrações do Atlas Compose com ferramentas de build.

Cada integração fixa seus próprios tipos de configuração e contexto e
expõe plugins de defaults, reutilizando o mesmo Composer e o mesmo
deep-merge do core:

    - shared  → extensões, aliases, regras comuns e injeção de env vars
    - vite    → ViteContext, define_config, with_base, with_react, with_pwa
    - rsbuild → RsbuildContext, define_config, with_base, with_react
    - rspack  → RspackContext, define_config, with_base, with_react

Plugins de terceiros (ex.: o plugin React de cada ferramenta) nunca são
importados aqui: são injetados como fábricas opcionais pelo chamador.
"""
