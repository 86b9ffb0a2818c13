# src/atlas_compose/integrations/rspack/plugins/with_base.py
"""
Plugin de defaults base para Rspack.

Precedência:
    - `mode` e `devtool` são definidos pelo plugin
    - `entry` recebido substitui integralmente o entry padrão
    - `module.rules` recebido substitui as regras padrão
    - `optimization.splitChunks` e `optimization.runtimeChunk` aceitam valor
      não estrutural (ex.: `splitChunks: False`), que substitui o default
    - demais chaves: a configuração recebida vence os defaults
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from atlas_compose.core.config.merge import MergePolicy, deep_merge
from atlas_compose.core.plugin.types import Mode
from atlas_compose.integrations.shared import COMMON_EXTENSIONS, NODE_MODULES_PATTERN, TS_JS_PATTERN

from ..types import RspackConfigPlugin, RspackConfiguration, RspackContext


_POLICIES = {
    "mode": MergePolicy.PREFER_EXISTING,
    "devtool": MergePolicy.PREFER_EXISTING,
    "entry": MergePolicy.PREFER_INCOMING,
    # aceitos pelo Rspack como objeto ou como valor/função
    "optimization.runtimeChunk": MergePolicy.REPLACE_ON_CONFLICT,
    "optimization.splitChunks": MergePolicy.REPLACE_ON_CONFLICT,
    "optimization.splitChunks.cacheGroups.vendor": MergePolicy.REPLACE_ON_CONFLICT,
}

VENDOR_PATTERN = re.compile(r"[\\/]node_modules[\\/]")


def default_rules() -> List[Dict[str, Any]]:
    """Regras padrão: SVG como asset e TS/JS via builtin:swc-loader."""
    return [
        {"test": re.compile(r"\.svg$"), "type": "asset"},
        {
            "test": TS_JS_PATTERN,
            "exclude": [NODE_MODULES_PATTERN],
            "loader": "builtin:swc-loader",
            "options": {
                "jsc": {
                    "parser": {"syntax": "typescript", "tsx": True},
                },
            },
            "type": "javascript/auto",
        },
    ]


def with_base(
    *,
    entry: Union[str, Sequence[str], Mapping[str, Any]] = "./src/main.ts",
    mode: Optional[str] = None,
    output_path: Optional[str] = None,
    public_path: str = "/",
    source_map: Optional[bool] = None,
    target: str = "web",
) -> RspackConfigPlugin:
    def base_plugin(config: RspackConfiguration, context: Optional[RspackContext] = None) -> RspackConfiguration:
        ctx = context or RspackContext()
        resolved_mode = Mode.parse(mode) if mode is not None else ctx.resolved_mode()
        is_dev = resolved_mode is Mode.DEVELOPMENT
        is_prod = resolved_mode is Mode.PRODUCTION
        with_source_map = is_dev if source_map is None else source_map

        if with_source_map:
            devtool: Any = ctx.get("devtool") or ("eval-source-map" if is_dev else "source-map")
        else:
            devtool = False

        defaults: RspackConfiguration = {
            "mode": resolved_mode.value,
            "entry": entry if isinstance(entry, (str, Mapping)) else list(entry),
            "target": ctx.get("target") or target,
            "output": {
                "path": output_path or ctx.resolved_output_path(),
                "filename": "[name].[contenthash:8].js" if is_prod else "[name].js",
                "chunkFilename": "[name].[contenthash:8].chunk.js" if is_prod else "[name].chunk.js",
                "publicPath": public_path,
                "clean": True,
            },
            "resolve": {"extensions": list(COMMON_EXTENSIONS)},
            "experiments": {"css": True},
            "devtool": devtool,
            "optimization": {
                "runtimeChunk": False,
                "splitChunks": {
                    "chunks": "all",
                    "cacheGroups": {
                        "vendor": {"test": VENDOR_PATTERN, "name": "vendors", "chunks": "all"},
                    },
                },
            },
            "module": {"rules": default_rules()},
            "plugins": [],
        }

        return deep_merge(defaults, config, policies=_POLICIES)

    base_plugin.__name__ = "rspack.with_base"
    return base_plugin
