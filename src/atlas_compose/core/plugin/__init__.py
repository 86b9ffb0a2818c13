# src/atlas_compose/core/plugin/__init__.py
"""
# Plugin Core — Atlas Compose

Este pacote define os **contratos canônicos** que toda unidade
componível deve satisfazer, independentemente da ferramenta de build
que consumirá a configuração final.

## Componentes

- **types**
  - `Mode`: modos de execução reconhecidos (development, production, none)

- **context**
  - `PluginContext`: contexto imutável compartilhado por todos os plugins de uma run

- **plugin**
  - `ConfigPlugin` (Protocol): contrato `(config, context) -> config`
  - `ConfigPluginFn`: alias genérico por tipo de configuração e de contexto

- **registry**
  - `PluginRegistry`: fábricas de plugins por nome e cadeias declarativas

## Princípios Fundamentais

- Plugins **não conhecem** o Composer nem sua posição na cadeia
- Plugins **não compartilham** estado entre si, exceto pela configuração
- O contexto é **somente leitura**
"""
