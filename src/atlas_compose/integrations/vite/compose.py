# src/atlas_compose/integrations/vite/compose.py
"""
Composição de plugins para Vite.

`define_config` devolve uma função `env -> config` no formato esperado
pelo `defineConfig` do Vite: o ambiente recebido (mode, command,
isSsrBuild, isPreview) é convertido em `ViteContext` e a cadeia é
aplicada a partir de uma configuração vazia.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from atlas_compose.core.engine.composer import create_compose_plugins
from atlas_compose.core.traceability.trace import CompositionTrace
from atlas_compose.integrations.shared import create_common_aliases

from .types import ViteConfiguration, ViteContext


compose_plugins = create_compose_plugins(ViteContext)


def create_base_config(context: Optional[ViteContext] = None) -> ViteConfiguration:
    """Configuração Vite mínima para o contexto informado."""
    ctx = context or ViteContext()
    return {
        "mode": ctx.resolved_mode().value,
        "build": {
            "outDir": ctx.resolved_output_path(),
            "sourcemap": ctx.is_development,
            "minify": ctx.is_production,
            "target": "es2015",
        },
        "resolve": {
            "alias": create_common_aliases(ctx.source_root or "src"),
        },
        "server": {
            "port": 3000,
            "host": True,
        },
        "plugins": [],
    }


def context_from_env(env: Optional[Mapping[str, Any]] = None) -> ViteContext:
    """Converte o `ConfigEnv` do Vite (camelCase) em `ViteContext`."""
    return ViteContext.from_mapping(env or {})


def define_config(
    *plugins: Any,
    trace: Optional[CompositionTrace] = None,
) -> Callable[[Optional[Mapping[str, Any]]], Dict[str, Any]]:
    composed = compose_plugins(*plugins, name="vite", trace=trace)

    def config_fn(env: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return composed({}, context_from_env(env))

    return config_fn
