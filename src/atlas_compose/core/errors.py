"""
Atlas Compose — Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do Atlas Compose.
Erros de composição fazem parte do contrato operacional do sistema,
devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma decisão implícita é permitida: uma composição que falha não
produz configuração parcial.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ComposeErrorPayload:
    """
    Payload canônico de erro do Atlas Compose.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Composer
PLUGIN_CONTRACT_VIOLATION = "PLUGIN_CONTRACT_VIOLATION"
PLUGIN_EXECUTION_ERROR = "PLUGIN_EXECUTION_ERROR"

# Merge / Configuração
MERGE_TYPE_MISMATCH = "MERGE_TYPE_MISMATCH"
CONFIG_FILE_ERROR = "CONFIG_FILE_ERROR"

# Contexto
INVALID_CONTEXT = "INVALID_CONTEXT"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def plugin_contract_violation(
    *,
    position: int,
    plugin: str,
    reason: str,
    received: Optional[str] = None,
    hint: str = "Ajuste o plugin para aceitar (config, context) e retornar um mapeamento de configuração.",
) -> ComposeErrorPayload:
    return ComposeErrorPayload(
        type=PLUGIN_CONTRACT_VIOLATION,
        message="Plugin viola o contrato (config, context) -> config",
        details={
            "position": position,
            "plugin": plugin,
            "reason": reason,
            "received": received,
        },
        hint=hint,
    )


def plugin_execution_error(
    *,
    position: int,
    plugin: str,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o stacktrace do plugin indicado. Nenhuma configuração parcial é produzida.",
) -> ComposeErrorPayload:
    return ComposeErrorPayload(
        type=PLUGIN_EXECUTION_ERROR,
        message="Falha inesperada durante a aplicação de um plugin",
        details={
            "position": position,
            "plugin": plugin,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def merge_type_mismatch(
    *,
    path: List[str],
    existing_type: str,
    incoming_type: str,
    hint: str = "Declare uma MergePolicy explícita para a chave ou alinhe o tipo do valor entre as fontes.",
) -> ComposeErrorPayload:
    return ComposeErrorPayload(
        type=MERGE_TYPE_MISMATCH,
        message="Conflito entre mapeamento e valor não estrutural durante o merge",
        details={
            "path": ".".join(path),
            "existing_type": existing_type,
            "incoming_type": incoming_type,
        },
        hint=hint,
    )


def config_file_error(
    *,
    path: str,
    reason: str,
    hint: str = "Revise o caminho e o formato do arquivo de configuração (YAML ou JSON com raiz mapeamento).",
) -> ComposeErrorPayload:
    return ComposeErrorPayload(
        type=CONFIG_FILE_ERROR,
        message="Arquivo de configuração inválido ou ausente",
        details={"path": path, "reason": reason},
        hint=hint,
    )
