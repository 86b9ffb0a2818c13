# src/atlas_compose/integrations/vite/__init__.py
"""
Integração Vite.

Uso típico:

    from atlas_compose.integrations.vite import define_config, with_base, with_react

    config_fn = define_config(with_base(), with_react(react_plugin=react))
    config = config_fn({"mode": "production", "command": "build"})
"""

from .compose import compose_plugins, context_from_env, create_base_config, define_config
from .plugins import with_base, with_pwa, with_react
from .types import ViteConfigPlugin, ViteConfiguration, ViteContext

__all__ = [
    "ViteConfigPlugin",
    "ViteConfiguration",
    "ViteContext",
    "compose_plugins",
    "context_from_env",
    "create_base_config",
    "define_config",
    "with_base",
    "with_pwa",
    "with_react",
]
