# src/atlas_compose/integrations/rspack/plugins/with_react.py
"""
Plugin React para Rspack.

Acrescenta uma regra `builtin:swc-loader` com a transformação React e,
apenas em development, a instância produzida por `refresh_plugin`
(ex.: `ReactRefreshRspackPlugin`), que é injetada pelo chamador.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from atlas_compose.core.config.merge import deep_merge
from atlas_compose.integrations.shared import COMMON_EXTENSIONS, SCRIPT_EXTENSIONS, create_common_rules

from ..types import RspackConfigPlugin, RspackConfiguration, RspackContext


def react_rule(*, runtime: str, development: bool, refresh: bool, import_source: str) -> Dict[str, Any]:
    return create_common_rules()["ts_js"](
        loader="builtin:swc-loader",
        options={
            "jsc": {
                "parser": {"syntax": "typescript", "tsx": True, "decorators": True},
                "transform": {
                    "react": {
                        "runtime": runtime,
                        "development": development,
                        "refresh": refresh,
                        "importSource": import_source,
                    },
                },
                "target": "es2015",
            },
        },
    )


def with_react(
    *,
    runtime: str = "automatic",
    development: Optional[bool] = None,
    refresh: bool = True,
    import_source: str = "react",
    refresh_plugin: Optional[Callable[[], Any]] = None,
) -> RspackConfigPlugin:
    def react_config_plugin(config: RspackConfiguration, context: Optional[RspackContext] = None) -> RspackConfiguration:
        ctx = context or RspackContext()
        is_dev = ctx.is_development if development is None else development
        use_refresh = refresh and is_dev

        module = config.get("module") or {}
        rules: List[Any] = list(module.get("rules") or [])
        rules.append(
            react_rule(runtime=runtime, development=is_dev, refresh=use_refresh, import_source=import_source)
        )

        plugins: List[Any] = list(config.get("plugins") or [])
        if use_refresh and refresh_plugin is not None:
            plugins.append(refresh_plugin())

        existing_extensions = (config.get("resolve") or {}).get("extensions") or COMMON_EXTENSIONS
        extensions = SCRIPT_EXTENSIONS + [ext for ext in existing_extensions if ext not in SCRIPT_EXTENSIONS]

        return deep_merge(
            config,
            {
                "module": {"rules": rules},
                "plugins": plugins,
                "resolve": {"extensions": extensions},
            },
        )

    react_config_plugin.__name__ = "rspack.with_react"
    return react_config_plugin
