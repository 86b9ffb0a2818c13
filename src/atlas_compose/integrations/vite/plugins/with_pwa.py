# src/atlas_compose/integrations/vite/plugins/with_pwa.py
"""
Plugin PWA para Vite.

A fábrica do plugin PWA (ex.: `VitePWA` de `vite-plugin-pwa`) é injetada
em `pwa_plugin` e recebe um único dicionário de opções. Com
`disabled=True`, ou sem fábrica, a configuração é devolvida sem alteração.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from atlas_compose.core.config.merge import deep_merge
from atlas_compose.core.plugin.types import Mode

from ..types import ViteConfigPlugin, ViteConfiguration, ViteContext


DEFAULT_INCLUDE_ASSETS = ["favicon.ico", "apple-touch-icon.png", "safari-pinned-tab.svg"]

DEFAULT_WORKBOX: Dict[str, Any] = {
    "globPatterns": ["**/*.{js,css,html,ico,png,svg}"],
    "globIgnores": ["**/*.json"],
    "runtimeCaching": [],
    "navigateFallback": "/index.html",
}


def build_pwa_options(
    context: ViteContext,
    *,
    register_type: str = "autoUpdate",
    base: str = "/",
    include_assets: Optional[Sequence[str]] = None,
    manifest: Optional[Mapping[str, Any]] = None,
    workbox: Optional[Mapping[str, Any]] = None,
    dev_options: Optional[Mapping[str, Any]] = None,
    inject_register: str = "auto",
    strategies: str = "generateSW",
    extra_options: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Opções repassadas à fábrica PWA; `workbox` e `dev_options` são mesclados aos defaults."""
    options: Dict[str, Any] = {
        "base": base,
        "registerType": register_type,
        "includeAssets": list(DEFAULT_INCLUDE_ASSETS if include_assets is None else include_assets),
        "strategies": strategies,
        "manifest": dict(manifest or {}),
        "workbox": deep_merge(DEFAULT_WORKBOX, workbox),
        "injectRegister": inject_register,
        "devOptions": deep_merge(
            {
                # só liga com development explícito no contexto
                "enabled": context.mode is Mode.DEVELOPMENT,
                "type": "module",
                "navigateFallback": "/index.html",
            },
            dev_options,
        ),
    }
    options.update(extra_options or {})
    return options


def with_pwa(
    *,
    disabled: bool = False,
    pwa_plugin: Optional[Callable[[Dict[str, Any]], Any]] = None,
    **options: Any,
) -> ViteConfigPlugin:
    """
    Cria o plugin PWA.

    `options` aceita os parâmetros de `build_pwa_options` (register_type,
    base, include_assets, manifest, workbox, dev_options, inject_register,
    strategies, extra_options).
    """
    # parâmetros inválidos falham na criação, não na composição
    build_pwa_options(ViteContext(), **options)

    def pwa_config_plugin(config: ViteConfiguration, context: Optional[ViteContext] = None) -> ViteConfiguration:
        if disabled or pwa_plugin is None:
            return config

        ctx = context or ViteContext()
        instance = pwa_plugin(build_pwa_options(ctx, **options))
        return deep_merge(config, {"plugins": list(config.get("plugins") or []) + [instance]})

    pwa_config_plugin.__name__ = "vite.with_pwa"
    return pwa_config_plugin
