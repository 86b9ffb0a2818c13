# src/atlas_compose/core/plugin/plugin.py
"""
Contrato canônico de plugin de configuração do Atlas Compose.

Um plugin é uma função pura `(config, context) -> config`: recebe a
configuração acumulada pelos plugins anteriores e o contexto imutável da
run, e devolve uma nova configuração.

Princípios fundamentais:
    - Plugins não conhecem o Composer nem a posição que ocupam na cadeia
    - Plugins não guardam estado entre invocações; opções vêm do closure
      da fábrica (`with_base(...)`) ou do contexto
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - O retorno é sempre um mapeamento (nunca None, escalar ou lista)
    - O contexto recebido não é mutado

Tipagem genérica:
    `ConfigPluginFn[ConfigT, ContextT]` permite que cada integração fixe
    seus próprios tipos de configuração e contexto, reutilizando o mesmo
    Composer e o mesmo merge.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Mapping, Optional, Protocol, TypeVar, runtime_checkable

from .context import PluginContext


ConfigT = TypeVar("ConfigT", bound=Mapping[str, Any])
ContextT = TypeVar("ContextT", bound=PluginContext)

# Alias genérico: ConfigPluginFn[ViteConfig, ViteContext]
ConfigPluginFn = Callable[[ConfigT, ContextT], ConfigT]


@runtime_checkable
class ConfigPlugin(Protocol):
    """
    Contrato estrutural de um plugin de configuração.

    O protocolo não impõe herança: qualquer callable que aceite
    `(config, context)` e devolva um mapeamento é um plugin válido,
    inclusive funções simples, `functools.partial` e instâncias com
    `__call__`.
    """

    def __call__(self, config: Mapping[str, Any], context: Optional[PluginContext] = None) -> Mapping[str, Any]:
        """Aplica o plugin sobre a configuração acumulada."""
        ...


def describe_plugin(plugin: Any) -> str:
    """Identidade legível e estável de um plugin para diagnóstico."""
    if isinstance(plugin, functools.partial):
        return f"partial({describe_plugin(plugin.func)})"
    name = getattr(plugin, "__name__", None)
    if isinstance(name, str) and name:
        if name == "<lambda>":
            return getattr(plugin, "__qualname__", name)
        return name
    return type(plugin).__name__


def accepts_plugin_call(plugin: Any, config: Any, context: Any) -> bool:
    """
    Verifica se `plugin(config, context)` é uma chamada vinculável.

    Callables cuja assinatura não pode ser inspecionada (alguns builtins)
    são aceitos; a verificação nesse caso fica a cargo da própria chamada.
    """
    if not callable(plugin):
        return False
    try:
        signature = inspect.signature(plugin)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(config, context)
    except TypeError:
        return False
    return True
