# src/atlas_compose/core/exceptions.py
"""
Atlas Compose — Canonical Exceptions (v1)

Este módulo define a hierarquia de exceções tipadas do Atlas Compose.

Objetivo:
- Permitir que Composer, merge e integrações levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ComposeErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`
- Mensagens são curtas e humanas
- Nenhuma exceção é silenciada ou convertida em resultado parcial
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from atlas_compose.core.errors import (
    ComposeErrorPayload,
    plugin_contract_violation,
    plugin_execution_error,
)


class ComposeError(Exception):
    """Base class para exceções do Atlas Compose.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - `hint` indica onde o operador deve corrigir
    """

    code: str = "COMPOSE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ComposeErrorPayload:
        """Converte a exceção em ComposeErrorPayload (serializável)."""
        return ComposeErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------

class ContractViolation(ComposeError):
    """
    Plugin não satisfaz o contrato `(config, context) -> config`.

    Levantada quando o item da cadeia não é invocável com essa assinatura
    ou quando retorna um valor não estrutural (None, escalar, lista).

    Invariantes:
        - `position` é o índice (base 0) do plugin na cadeia
        - Nenhum plugin posterior é executado
    """

    code = "PLUGIN_CONTRACT_VIOLATION"

    def __init__(
        self,
        message: str,
        *,
        position: int,
        plugin_name: str,
        reason: str,
        received: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            details={
                "position": position,
                "plugin": plugin_name,
                "reason": reason,
                "received": received,
            },
        )
        self.position = position
        self.plugin_name = plugin_name
        self.reason = reason
        self.received = received

    def to_payload(self) -> ComposeErrorPayload:
        return plugin_contract_violation(
            position=self.position,
            plugin=self.plugin_name,
            reason=self.reason,
            received=self.received,
        )


class PluginExecutionError(ComposeError):
    """Plugin levantou uma exceção durante a composição (encapsulada).

    A exceção original fica disponível em `__cause__`.
    """

    code = "PLUGIN_EXECUTION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        position: int,
        plugin_name: str,
        exc_type: str,
        exc_message: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            details={
                "position": position,
                "plugin": plugin_name,
                "exc_type": exc_type,
                "exc_message": exc_message,
            },
        )
        self.position = position
        self.plugin_name = plugin_name
        self.exc_type = exc_type
        self.exc_message = exc_message

    def to_payload(self) -> ComposeErrorPayload:
        return plugin_execution_error(
            position=self.position,
            plugin=self.plugin_name,
            exc_type=self.exc_type,
            exc_message=self.exc_message,
        )


class InvalidContextError(ComposeError):
    """Valor inválido para um campo reconhecido do contexto (ex.: mode)."""

    code = "INVALID_CONTEXT"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class DuplicatePluginNameError(ComposeError):
    """Nome de plugin já registrado no PluginRegistry."""

    code = "DUPLICATE_PLUGIN_NAME"


class UnknownPluginError(ComposeError):
    """Nome de plugin referenciado não existe no PluginRegistry."""

    code = "UNKNOWN_PLUGIN"


# ---------------------------------------------------------------------------
# Traceability
# ---------------------------------------------------------------------------

class TraceReuseError(ComposeError):
    """CompositionTrace já registrou uma run; cada run exige um trace novo."""

    code = "TRACE_ALREADY_USED"
