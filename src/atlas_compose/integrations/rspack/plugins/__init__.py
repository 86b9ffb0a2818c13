# src/atlas_compose/integrations/rspack/plugins/__init__.py
"""Plugins de defaults para Rspack."""

from .with_base import with_base
from .with_react import with_react

__all__ = ["with_base", "with_react"]
