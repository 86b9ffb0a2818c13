# src/atlas_compose/integrations/rsbuild/types.py
"""Tipos da integração Rsbuild."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from atlas_compose.core.plugin.context import PluginContext
from atlas_compose.core.plugin.plugin import ConfigPluginFn


RsbuildConfiguration = Dict[str, Any]


@dataclass(frozen=True)
class RsbuildContext(PluginContext):
    target: Optional[str] = None  # "web" | "node" | "web-worker"
    environment: Optional[str] = None
    cwd: Optional[str] = None


RsbuildConfigPlugin = ConfigPluginFn[RsbuildConfiguration, RsbuildContext]
