# src/atlas_compose/integrations/rsbuild/plugins/with_react.py
"""
Plugin React para Rsbuild.

A fábrica `react_plugin` (ex.: `pluginReact` de `@rsbuild/plugin-react`)
é injetada e recebe `swcReactOptions` como argumento nomeado.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from atlas_compose.core.config.merge import deep_merge
from atlas_compose.integrations.shared import TS_JS_PATTERN

from ..types import RsbuildConfigPlugin, RsbuildConfiguration, RsbuildContext


def with_react(
    *,
    runtime: str = "automatic",
    development: Optional[bool] = None,
    refresh: bool = True,
    import_source: str = "react",
    react_plugin: Optional[Callable[..., Any]] = None,
) -> RsbuildConfigPlugin:
    def react_config_plugin(
        config: RsbuildConfiguration,
        context: Optional[RsbuildContext] = None,
    ) -> RsbuildConfiguration:
        ctx = context or RsbuildContext()
        is_dev = ctx.is_development if development is None else development

        plugins: List[Any] = list(config.get("plugins") or [])
        if react_plugin is not None:
            plugins.append(
                react_plugin(
                    swcReactOptions={
                        "runtime": runtime,
                        "development": is_dev,
                        "refresh": refresh and is_dev,
                        "importSource": import_source,
                    }
                )
            )

        source = config.get("source") or {}
        include = [TS_JS_PATTERN] + [p for p in source.get("include") or [] if p is not TS_JS_PATTERN]

        return deep_merge(config, {"plugins": plugins, "source": {"include": include}})

    react_config_plugin.__name__ = "rsbuild.with_react"
    return react_config_plugin
