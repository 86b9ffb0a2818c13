# src/atlas_compose/integrations/rspack/types.py
"""Tipos da integração Rspack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from atlas_compose.core.plugin.context import PluginContext
from atlas_compose.core.plugin.plugin import ConfigPluginFn


RspackConfiguration = Dict[str, Any]


@dataclass(frozen=True)
class RspackContext(PluginContext):
    target: Optional[str] = None
    devtool: Optional[str] = None


RspackConfigPlugin = ConfigPluginFn[RspackConfiguration, RspackContext]
