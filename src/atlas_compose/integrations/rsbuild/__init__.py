# src/atlas_compose/integrations/rsbuild/__init__.py
"""
Integração Rsbuild.

    from atlas_compose.integrations.rsbuild import define_config, with_base

    config = define_config(with_base(entry="./src/index.tsx"), context={"mode": "production"})
"""

from .compose import compose_plugins, create_base_config, define_config
from .plugins import with_base, with_react
from .types import RsbuildConfigPlugin, RsbuildConfiguration, RsbuildContext

__all__ = [
    "RsbuildConfigPlugin",
    "RsbuildConfiguration",
    "RsbuildContext",
    "compose_plugins",
    "create_base_config",
    "define_config",
    "with_base",
    "with_react",
]
