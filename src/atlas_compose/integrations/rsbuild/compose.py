# src/atlas_compose/integrations/rsbuild/compose.py
"""
Composição de plugins para Rsbuild.

Diferente do Vite, o Rsbuild recebe a configuração já resolvida:
`define_config` aplica a cadeia imediatamente, a partir de uma
configuração vazia e do contexto informado.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from atlas_compose.core.engine.composer import create_compose_plugins
from atlas_compose.core.traceability.trace import CompositionTrace

from .types import RsbuildConfiguration, RsbuildContext


compose_plugins = create_compose_plugins(RsbuildContext)


def create_base_config(context: Optional[RsbuildContext] = None) -> RsbuildConfiguration:
    ctx = context or RsbuildContext()
    return {
        "source": {
            "entry": {"index": "./src/main.ts"},
        },
        "output": {
            "target": ctx.get("target") or "web",
            "distPath": {"root": ctx.resolved_output_path()},
            "cleanDistPath": True,
            "assetPrefix": "/",
        },
        "server": {"port": 3000},
        "dev": {
            "hmr": ctx.is_development,
            "liveReload": ctx.is_development,
        },
        "plugins": [],
    }


def define_config(
    *plugins: Any,
    context: Union[RsbuildContext, Mapping[str, Any], None] = None,
    trace: Optional[CompositionTrace] = None,
) -> RsbuildConfiguration:
    return compose_plugins(*plugins, name="rsbuild", trace=trace)({}, context)
