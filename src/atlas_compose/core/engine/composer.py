# src/atlas_compose/core/engine/composer.py
"""
Composer de plugins de configuração do Atlas Compose.

Este módulo dobra uma sequência ordenada de plugins em um único plugin
equivalente. O plugin combinado inicializa um acumulador com a
configuração inicial e o repassa, junto com o mesmo contexto, a cada
plugin na ordem declarada.

Política de falha (fail-fast):
    - Item não invocável como `(config, context)` → ContractViolation
    - Retorno não estrutural (None, escalar, lista) → ContractViolation
    - Exceção levantada pelo plugin → PluginExecutionError (causa encadeada)
    - ContractViolation / PluginExecutionError vindas de uma composição
      aninhada propagam sem reembrulho (a posição mais interna é a útil)
    - A primeira falha aborta a cadeia; nenhum resultado parcial é devolvido

Diagnóstico:
    Quando um `CompositionTrace` é fornecido, o Composer registra
    início/fim da composição e de cada plugin, inclusive falhas com o
    payload de erro serializável. Esse é o único efeito colateral.
    Um trace corresponde a uma única run: reinvocar o plugin combinado com
    o mesmo trace levanta `TraceReuseError`.

Invariantes:
    - Plugins executam na ordem exata fornecida, sequencialmente
    - Todos os plugins recebem o mesmo objeto de contexto
    - Zero plugins é a identidade sobre a configuração inicial

Limites explícitos:
    - Não realiza I/O
    - Não faz cache nem memoização
    - Não tenta retry, skip ou recuperação
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, Tuple, Type

from atlas_compose.core.config.hashing import compute_config_hash
from atlas_compose.core.config.merge import is_mapping
from atlas_compose.core.exceptions import (
    ComposeError,
    ContractViolation,
    InvalidContextError,
    PluginExecutionError,
)
from atlas_compose.core.plugin.context import PluginContext
from atlas_compose.core.plugin.plugin import (
    ConfigT,
    ContextT,
    accepts_plugin_call,
    describe_plugin,
)
from atlas_compose.core.traceability import trace as tr


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ComposedPlugin(Generic[ConfigT, ContextT]):
    """
    Plugin combinado produzido pelo Composer.

    É ele próprio um plugin válido `(config, context) -> config`, podendo
    ser composto dentro de outra cadeia.
    """

    def __init__(
        self,
        plugins: Iterable[Any],
        *,
        name: Optional[str] = None,
        trace: Optional[tr.CompositionTrace] = None,
        context_cls: Type[PluginContext] = PluginContext,
    ) -> None:
        self.plugins: Tuple[Any, ...] = tuple(plugins)
        self.trace = trace
        self.context_cls = context_cls
        self.__name__ = name or f"composed[{len(self.plugins)}]"

    def __repr__(self) -> str:
        names = ", ".join(describe_plugin(p) for p in self.plugins)
        return f"ComposedPlugin({self.__name__}: {names})"

    # ------------------------------------------------------------------
    # Contexto
    # ------------------------------------------------------------------
    def _resolve_context(self, context: Any) -> PluginContext:
        if context is None:
            return self.context_cls()
        if isinstance(context, self.context_cls):
            return context
        if isinstance(context, PluginContext):
            # outro tipo de contexto: reconstruído no tipo vinculado; extras que
            # correspondem a campos do tipo vinculado são promovidos a campos
            data = dict(context.extra)
            data.update({k: v for k, v in context.to_dict().items() if k != "extra" and v is not None})
            return self.context_cls.from_mapping(data)
        if isinstance(context, Mapping):
            return self.context_cls.from_mapping(context)
        raise InvalidContextError(
            f"Contexto deve ser PluginContext ou Mapping, recebido: {type(context).__name__}",
            details={"received": type(context).__name__},
        )

    # ------------------------------------------------------------------
    # Diagnóstico
    # ------------------------------------------------------------------
    def _failed(self, position: int, error: ComposeError) -> ComposeError:
        if self.trace is not None:
            tr.plugin_failed(self.trace, position=position, ts=_now(), error=error.to_payload().to_dict())
        return error

    # ------------------------------------------------------------------
    # Execução
    # ------------------------------------------------------------------
    def __call__(self, initial_config: Optional[ConfigT] = None, context: Optional[ContextT] = None) -> ConfigT:
        config = {} if initial_config is None else initial_config
        ctx = self._resolve_context(context)

        if self.trace is not None:
            tr.compose_started(
                self.trace,
                ts=_now(),
                plugin_names=[describe_plugin(p) for p in self.plugins],
                context=ctx.to_dict(),
            )

        for position, plugin in enumerate(self.plugins):
            plugin_name = describe_plugin(plugin)
            if self.trace is not None:
                tr.plugin_started(self.trace, position=position, plugin=plugin_name, ts=_now())

            if not accepts_plugin_call(plugin, config, ctx):
                raise self._failed(
                    position,
                    ContractViolation(
                        f"Plugin na posição {position} ({plugin_name}) não é invocável como (config, context)",
                        position=position,
                        plugin_name=plugin_name,
                        reason="not_callable" if not callable(plugin) else "incompatible_signature",
                        received=type(plugin).__name__,
                    ),
                )

            try:
                result = plugin(config, ctx)
            except (ContractViolation, PluginExecutionError) as exc:
                raise self._failed(position, exc)
            except Exception as exc:
                raise self._failed(
                    position,
                    PluginExecutionError(
                        f"Plugin na posição {position} ({plugin_name}) falhou: {exc}",
                        position=position,
                        plugin_name=plugin_name,
                        exc_type=type(exc).__name__,
                        exc_message=str(exc),
                    ),
                ) from exc

            if not is_mapping(result):
                raise self._failed(
                    position,
                    ContractViolation(
                        f"Plugin na posição {position} ({plugin_name}) retornou valor não estrutural: "
                        f"{type(result).__name__}",
                        position=position,
                        plugin_name=plugin_name,
                        reason="non_structural_return",
                        received=type(result).__name__,
                    ),
                )

            config = result
            if self.trace is not None:
                tr.plugin_finished(self.trace, position=position, ts=_now())

        if self.trace is not None and is_mapping(config):
            tr.compose_finished(self.trace, ts=_now(), config_hash=compute_config_hash(config))

        return config


def create_compose_plugins(
    context_cls: Type[PluginContext] = PluginContext,
) -> Callable[..., ComposedPlugin]:
    """
    Cria uma função `compose_plugins` vinculada a um tipo de contexto.

    Cada integração chama esta fábrica uma vez, fixando seu próprio
    contexto (ex.: `ViteContext`). Mappings recebidos como contexto na
    invocação são convertidos com `context_cls.from_mapping`.
    """

    def compose_plugins(
        *plugins: Any,
        name: Optional[str] = None,
        trace: Optional[tr.CompositionTrace] = None,
    ) -> ComposedPlugin:
        return ComposedPlugin(plugins, name=name, trace=trace, context_cls=context_cls)

    return compose_plugins


compose_plugins = create_compose_plugins()
