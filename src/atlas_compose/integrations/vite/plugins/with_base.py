# src/atlas_compose/integrations/vite/plugins/with_base.py
"""
Plugin de defaults base para Vite.

Produz a configuração de partida de um projeto (build, resolve, server,
preview, css modules, define) e a combina com a configuração recebida.

Precedência:
    - `mode`, `base` e `envPrefix` são definidos pelo plugin
    - demais chaves: a configuração recebida vence os defaults
    - `esbuild`, `css.modules`, `resolve.alias` e `build.rollupOptions` aceitam
      valor não estrutural (ex.: `esbuild: False`), que substitui o default
    - mapeamentos aninhados (build, server, define, ...) são mesclados
      recursivamente; listas (plugins, build.target) são substituídas
"""

from __future__ import annotations

import json
from typing import Any, Optional, Sequence, Union

from atlas_compose.core.config.merge import MergePolicy, deep_merge
from atlas_compose.core.plugin.types import Mode
from atlas_compose.integrations.shared import COMMON_EXTENSIONS, create_common_aliases

from ..types import ViteConfigPlugin, ViteConfiguration, ViteContext


_POLICIES = {
    "mode": MergePolicy.PREFER_EXISTING,
    "base": MergePolicy.PREFER_EXISTING,
    "envPrefix": MergePolicy.PREFER_EXISTING,
    # aceitos pelo Vite como objeto ou como valor/função
    "esbuild": MergePolicy.REPLACE_ON_CONFLICT,
    "css.modules": MergePolicy.REPLACE_ON_CONFLICT,
    "resolve.alias": MergePolicy.REPLACE_ON_CONFLICT,
    "build.rollupOptions": MergePolicy.REPLACE_ON_CONFLICT,
}


def with_base(
    *,
    mode: Optional[str] = None,
    output_path: Optional[str] = None,
    public_path: str = "/",
    source_map: Optional[bool] = None,
    target: Union[str, Sequence[str]] = "es2020",
    env_prefix: Sequence[str] = ("VITE_",),
    server_port: int = 3000,
    preview_port: int = 5000,
) -> ViteConfigPlugin:
    """
    Cria o plugin de defaults base.

    Args:
        mode: Sobrepõe o modo do contexto.
        output_path: Sobrepõe `context.output_path` (default "dist").
        public_path: Valor de `base`.
        source_map: Default: ligado apenas em development.
        target: Alvo(s) de build; string única ou sequência.
    """
    targets = [target] if isinstance(target, str) else list(target)

    def base_plugin(config: ViteConfiguration, context: Optional[ViteContext] = None) -> ViteConfiguration:
        ctx = context or ViteContext()
        resolved_mode = Mode.parse(mode) if mode is not None else ctx.resolved_mode()
        is_dev = resolved_mode is Mode.DEVELOPMENT

        defaults: ViteConfiguration = {
            "mode": resolved_mode.value,
            "base": public_path,
            "build": {
                "outDir": output_path or ctx.resolved_output_path(),
                "sourcemap": is_dev if source_map is None else source_map,
                "minify": resolved_mode is Mode.PRODUCTION,
                "target": list(targets),
                "rollupOptions": {},
            },
            "resolve": {
                "extensions": list(COMMON_EXTENSIONS),
                "alias": create_common_aliases(ctx.source_root or "src"),
            },
            "server": {"port": server_port, "host": True},
            "preview": {"port": preview_port, "host": True},
            "css": {
                "modules": {
                    "localsConvention": "camelCaseOnly",
                    "generateScopedName": "[name]__[local]___[hash:base64:5]",
                },
            },
            "envPrefix": list(env_prefix),
            "optimizeDeps": {},
            "esbuild": {"target": targets[0] if len(targets) == 1 else list(targets)},
            "define": {"process.env.NODE_ENV": json.dumps(resolved_mode.value)},
            "plugins": [],
        }

        return deep_merge(defaults, config, policies=_POLICIES)

    base_plugin.__name__ = "vite.with_base"
    return base_plugin
