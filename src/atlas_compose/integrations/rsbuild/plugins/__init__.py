# src/atlas_compose/integrations/rsbuild/plugins/__init__.py
"""Plugins de defaults para Rsbuild."""

from .with_base import with_base
from .with_react import with_react

__all__ = ["with_base", "with_react"]
