# src/atlas_compose/integrations/vite/plugins/with_react.py
"""
Plugin React para Vite.

O plugin de build React (ex.: `@vitejs/plugin-react`) não é dependência
do Atlas Compose: a fábrica é injetada em `react_plugin`. Sem fábrica,
apenas as demais chaves (extensões, optimizeDeps, chunks, define) são
ajustadas.
"""

from __future__ import annotations

import json
from typing import Any, Callable, List, Optional

from atlas_compose.core.config.merge import deep_merge, is_mapping
from atlas_compose.integrations.shared import merge_extensions

from ..types import ViteConfigPlugin, ViteConfiguration, ViteContext


REACT_DEPENDENCIES = ["react", "react-dom", "react/jsx-runtime", "react-dom/client"]


def react_manual_chunks(module_id: str) -> Optional[str]:
    """Agrupa módulos React no chunk `react-vendor`."""
    if "react" in module_id:
        return "react-vendor"
    return None


def with_react(
    *,
    runtime: str = "automatic",
    import_source: str = "react",
    development: Optional[bool] = None,
    react_plugin: Optional[Callable[..., Any]] = None,
) -> ViteConfigPlugin:
    def react_config_plugin(config: ViteConfiguration, context: Optional[ViteContext] = None) -> ViteConfiguration:
        ctx = context or ViteContext()
        is_dev = ctx.is_development if development is None else development

        plugins: List[Any] = list(config.get("plugins") or [])
        if react_plugin is not None:
            plugins.append(react_plugin(jsxRuntime=runtime, jsxImportSource=import_source))

        resolve = config.get("resolve") or {}
        optimize_deps = config.get("optimizeDeps") or {}
        include = REACT_DEPENDENCIES + [d for d in optimize_deps.get("include") or [] if d not in REACT_DEPENDENCIES]

        overlay: ViteConfiguration = {
            "plugins": plugins,
            "resolve": {"extensions": merge_extensions(resolve.get("extensions"))},
            "optimizeDeps": {
                "include": include,
                "exclude": list(optimize_deps.get("exclude") or []),
            },
        }

        # `output` em lista (múltiplas saídas Rollup) é mantido como recebido
        rollup_options = (config.get("build") or {}).get("rollupOptions")
        rollup_output = rollup_options.get("output") if is_mapping(rollup_options) else None
        chunkable = rollup_options is None or (
            is_mapping(rollup_options) and (rollup_output is None or is_mapping(rollup_output))
        )
        if chunkable:
            overlay["build"] = {"rollupOptions": {"output": {"manualChunks": react_manual_chunks}}}

        # define: valores já configurados vencem
        react_defines = {
            "define": {
                "__DEV__": json.dumps(is_dev),
                "process.env.NODE_ENV": json.dumps(ctx.resolved_mode().value),
            }
        }
        return deep_merge(react_defines, deep_merge(config, overlay))

    react_config_plugin.__name__ = "vite.with_react"
    return react_config_plugin
