# src/atlas_compose/integrations/rspack/__init__.py
"""Integração Rspack: `RspackContext`, `define_config`, `with_base`, `with_react`."""

from .compose import compose_plugins, define_config
from .plugins import with_base, with_react
from .types import RspackConfigPlugin, RspackConfiguration, RspackContext

__all__ = [
    "RspackConfigPlugin",
    "RspackConfiguration",
    "RspackContext",
    "compose_plugins",
    "define_config",
    "with_base",
    "with_react",
]
