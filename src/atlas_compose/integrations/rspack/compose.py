# src/atlas_compose/integrations/rspack/compose.py
"""Composição de plugins para Rspack (configuração resolvida imediatamente)."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from atlas_compose.core.engine.composer import create_compose_plugins
from atlas_compose.core.traceability.trace import CompositionTrace

from .types import RspackConfiguration, RspackContext


compose_plugins = create_compose_plugins(RspackContext)


def define_config(
    *plugins: Any,
    context: Union[RspackContext, Mapping[str, Any], None] = None,
    trace: Optional[CompositionTrace] = None,
) -> RspackConfiguration:
    return compose_plugins(*plugins, name="rspack", trace=trace)({}, context)
