# src/atlas_compose/core/plugin/registry.py
"""
Registro de fábricas de plugins por nome.

Este módulo define o `PluginRegistry`, que associa nomes estáveis a
fábricas de plugins (`with_base`, `with_react`, ...) e constrói cadeias
a partir de uma declaração em dados, tipicamente lida de YAML:

    plugins:
      - base
      - name: react
        options: {runtime: classic}

Decisões arquiteturais:
    - Nomes são únicos; duplicidade é erro fatal no registro
    - A ordem da declaração é a ordem da cadeia (nunca reordenada)
    - O registry não executa plugins; apenas os instancia

Invariantes:
    - Cada nome registrado é uma string não vazia
    - `names()` reflete exatamente a ordem de registro

Limites explícitos:
    - Não valida as opções repassadas às fábricas
    - Não carrega arquivos (use `core.config.loader`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from atlas_compose.core.exceptions import (
    DuplicatePluginNameError,
    UnknownPluginError,
)

from .plugin import ConfigPluginFn


PluginFactory = Callable[..., ConfigPluginFn]
PluginSpec = Union[str, Mapping[str, Any]]


@dataclass
class PluginRegistry:
    """Registro canônico de fábricas de plugins, indexado por nome."""

    _factories: Dict[str, PluginFactory] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def register(self, name: str, factory: PluginFactory) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("plugin name must be a non-empty string")
        if not callable(factory):
            raise TypeError(f"factory for plugin '{name}' must be callable")

        if name in self._factories:
            raise DuplicatePluginNameError(
                f"Duplicate plugin name: {name}",
                details={"name": name},
            )

        self._factories[name] = factory
        self._order.append(name)

    def get(self, name: str) -> PluginFactory:
        if name not in self._factories:
            raise UnknownPluginError(
                f"Unknown plugin: {name}",
                details={"name": name, "registered": list(self._order)},
                hint="Registre a fábrica do plugin antes de referenciá-la.",
            )
        return self._factories[name]

    def names(self) -> List[str]:
        return list(self._order)

    def build(self, specs: Iterable[PluginSpec]) -> List[ConfigPluginFn]:
        """Instancia a cadeia declarada, preservando a ordem."""
        chain: List[ConfigPluginFn] = []
        for spec in specs:
            name, options = _parse_spec(spec)
            chain.append(self.get(name)(**options))
        return chain

    def compose(
        self,
        specs: Iterable[PluginSpec],
        *,
        name: Optional[str] = None,
        trace=None,
        compose_fn: Optional[Callable[..., Any]] = None,
    ):
        """
        Atalho: `build` seguido de `compose_plugins`.

        `compose_fn` permite usar o composer de uma integração (ex.:
        `atlas_compose.integrations.vite.compose_plugins`), para que
        contextos em Mapping sejam convertidos no tipo de contexto dela.
        """
        if compose_fn is None:
            # import tardio: engine depende de plugin, não o contrário
            from atlas_compose.core.engine.composer import compose_plugins as compose_fn

        return compose_fn(*self.build(specs), name=name, trace=trace)


def _parse_spec(spec: PluginSpec):
    if isinstance(spec, str):
        return spec, {}
    if isinstance(spec, Mapping) and isinstance(spec.get("name"), str):
        options = spec.get("options") or {}
        if not isinstance(options, Mapping):
            raise TypeError(f"options for plugin '{spec['name']}' must be a mapping")
        return spec["name"], dict(options)
    raise TypeError(f"invalid plugin spec: {spec!r}")
