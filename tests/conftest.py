# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Compose.

Este módulo define fixtures reutilizáveis que fornecem:
- contextos de composição determinísticos (PluginContext)
- plugins mínimos e previsíveis para testes do Composer
- conteúdos YAML de configuração (defaults e override local)

O objetivo destas fixtures é permitir testes do core
(config, plugin, engine e traceability) sem depender de:
- ferramentas de build reais (Vite, Rsbuild, Rspack)
- variáveis de ambiente do processo
- plugins de terceiros

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Plugins dummy são funções simples (duck typing, sem herança)
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture contém lógica de domínio de build
    - Todas as fixtures são seguras para execução em paralelo

Limites explícitos:
    - Não substituir testes de integração
    - Não acoplar testes a implementações concretas de plugins reais
"""

import pytest


# =====================================================
# Config Loader fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao uso real.

    Representa o conteúdo típico de um `compose.defaults.yaml`, base
    canônica sobre a qual overrides locais são aplicados via deep-merge.

    Returns:
        str: Conteúdo YAML representando configuração padrão.
    """
    return """\
output:
  path: dist
  clean: true
server:
  port: 3000
  host: localhost
plugins: []
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de override local (apenas chaves sobrepostas).

    Returns:
        str: Conteúdo YAML representando configuração local de override.
    """
    return """\
output:
  path: build
server:
  port: 8080
"""


# =====================================================
# Plugin / Context fixtures
# =====================================================

@pytest.fixture
def dummy_ctx():
    """
    PluginContext determinístico para testes.

    Decisões arquiteturais:
        - Import lazy para melhorar a legibilidade de erros
        - Valores fixos para garantir reprodutibilidade

    Returns:
        PluginContext: Contexto em modo production com raízes fixas.
    """
    from atlas_compose.core.plugin.context import PluginContext

    return PluginContext(
        mode="production",
        project_root="/repo",
        source_root="src",
        output_path="dist",
        extra={"source": "pytest"},
    )


@pytest.fixture
def make_set_plugin():
    """
    Fábrica de plugins que gravam `value` em um caminho pontuado.

    O plugin produzido é puro: devolve uma nova configuração via
    deep-merge, sem mutar a recebida.

    Returns:
        Callable[[str, Any], plugin]
    """
    from atlas_compose.core.config.merge import deep_merge

    def make(dotted_key: str, value):
        overlay = value
        for part in reversed(dotted_key.split(".")):
            overlay = {part: overlay}

        def set_plugin(config, context):
            return deep_merge(config, overlay)

        set_plugin.__name__ = f"set({dotted_key})"
        return set_plugin

    return make


@pytest.fixture
def recording_plugin():
    """
    Fábrica de plugins que registram (nome, config, context) em `calls`.

    Returns:
        Tuple[Callable[[str], plugin], list]: fábrica e lista de chamadas.
    """
    calls = []

    def make(name: str):
        def plugin(config, context):
            calls.append((name, config, context))
            return {**config, "trail": list(config.get("trail", [])) + [name]}

        plugin.__name__ = name
        return plugin

    return make, calls
