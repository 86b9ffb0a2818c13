# src/atlas_compose/integrations/vite/plugins/__init__.py
"""Plugins de defaults para Vite."""

from .with_base import with_base
from .with_pwa import with_pwa
from .with_react import with_react

__all__ = ["with_base", "with_pwa", "with_react"]
