# src/atlas_compose/core/plugin/types.py
"""
Tipos canônicos compartilhados por plugins e contextos.

Componentes:
    - Mode → modo de execução reconhecido pelo contexto
      (development, production, none)

Os valores são strings para facilitar serialização em JSON/YAML e
leitura direta a partir de arquivos de contexto.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from atlas_compose.core.exceptions import InvalidContextError


DEFAULT_OUTPUT_PATH = "dist"


class Mode(str, Enum):
    """
    Modo de execução de uma composição.

    Decisões arquiteturais:
        - O modo é apenas um insumo de leitura para plugins
        - O core nunca decide comportamento com base no modo
        - Na ausência de modo, consumidores assumem DEVELOPMENT
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    NONE = "none"

    @classmethod
    def parse(cls, value: Any) -> "Mode":
        """Converte string (ou Mode) em Mode, rejeitando valores desconhecidos."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidContextError(
                f"Modo inválido: {value!r}",
                details={"field": "mode", "value": repr(value), "allowed": [m.value for m in cls]},
                hint="Use um dos modos: development, production, none.",
            ) from None


DEFAULT_MODE = Mode.DEVELOPMENT
