# src/atlas_compose/integrations/rsbuild/plugins/with_base.py
"""
Plugin de defaults base para Rsbuild.

Precedência:
    - valores do contexto (mode, output_path) vencem as opções do plugin
    - a configuração recebida vence os defaults, chave a chave
    - `source.entry` recebido substitui integralmente o entry padrão
    - `tools.rspack` e `resolve.alias` recebidos (objeto ou função) vencem o default
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Union

from atlas_compose.core.config.merge import MergePolicy, deep_merge
from atlas_compose.core.plugin.types import Mode
from atlas_compose.integrations.shared import create_common_aliases

from ..types import RsbuildConfigPlugin, RsbuildConfiguration, RsbuildContext


EntryOption = Union[str, Sequence[str], Mapping[str, Any]]

_POLICIES = {
    "source.entry": MergePolicy.PREFER_INCOMING,
    # aceitos pelo Rsbuild como objeto ou como valor/função
    "tools.rspack": MergePolicy.REPLACE_ON_CONFLICT,
    "resolve.alias": MergePolicy.REPLACE_ON_CONFLICT,
}


def normalize_entry(entry: EntryOption) -> Dict[str, Any]:
    """String ou lista viram `{"index": entry}`; mapeamentos são copiados."""
    if isinstance(entry, Mapping):
        return dict(entry)
    if isinstance(entry, str):
        return {"index": entry}
    return {"index": list(entry)}


def devtool_hook(source_map: bool, is_dev: bool):
    """Hook `tools.rspack`: define `devtool` sobre a config Rspack gerada pelo Rsbuild."""

    def apply_devtool(rspack_config: Mapping[str, Any]) -> Dict[str, Any]:
        if not source_map:
            return deep_merge(rspack_config)
        return deep_merge(rspack_config, {"devtool": "eval-source-map" if is_dev else "source-map"})

    return apply_devtool


def with_base(
    *,
    entry: EntryOption = "./src/main.ts",
    mode: Optional[str] = None,
    output_path: Optional[str] = None,
    public_path: str = "/",
    source_map: Optional[bool] = None,
    target: str = "web",
    server_port: int = 3000,
    server_host: str = "localhost",
) -> RsbuildConfigPlugin:
    def base_plugin(config: RsbuildConfiguration, context: Optional[RsbuildContext] = None) -> RsbuildConfiguration:
        ctx = context or RsbuildContext()
        if ctx.mode is not None:
            resolved_mode = ctx.mode
        elif mode is not None:
            resolved_mode = Mode.parse(mode)
        else:
            resolved_mode = Mode.DEVELOPMENT
        is_dev = resolved_mode is Mode.DEVELOPMENT
        is_prod = resolved_mode is Mode.PRODUCTION
        dist = ctx.output_path or output_path or "dist"

        defaults: RsbuildConfiguration = {
            "source": {"entry": normalize_entry(entry)},
            "resolve": {"alias": create_common_aliases(ctx.source_root or "src")},
            "output": {
                "target": ctx.get("target") or target,
                "distPath": {"root": dist},
                "filename": {
                    "js": "[name].[contenthash:8].js" if is_prod else "[name].js",
                    "css": "[name].[contenthash:8].css" if is_prod else "[name].css",
                },
                "assetPrefix": public_path,
                "cleanDistPath": True,
            },
            "server": {"port": server_port, "host": server_host},
            "dev": {"hmr": is_dev, "liveReload": is_dev},
            "tools": {
                "rspack": devtool_hook(is_dev if source_map is None else source_map, is_dev),
            },
            "plugins": [],
        }

        return deep_merge(defaults, config, policies=_POLICIES)

    base_plugin.__name__ = "rsbuild.with_base"
    return base_plugin
