# src/atlas_compose/integrations/vite/types.py
"""Tipos da integração Vite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from atlas_compose.core.plugin.context import PluginContext
from atlas_compose.core.plugin.plugin import ConfigPluginFn


ViteConfiguration = Dict[str, Any]


@dataclass(frozen=True)
class ViteContext(PluginContext):
    """Contexto Vite: acrescenta os campos de `ConfigEnv` ao vocabulário base."""

    command: Optional[str] = None  # "build" | "serve"
    is_ssr_build: Optional[bool] = None
    is_preview: Optional[bool] = None


ViteConfigPlugin = ConfigPluginFn[ViteConfiguration, ViteContext]
