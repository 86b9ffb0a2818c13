# src/atlas_compose/core/config/hashing.py
"""
Hashing canônico de configuração do Atlas Compose.

Este módulo gera um hash determinístico da configuração produzida por
uma composição, usado pelo `CompositionTrace` para identificar
estruturalmente o resultado de uma run.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Objetos opacos (instâncias de plugins, callables) entram no hash
      pelo nome qualificado do tipo, nunca pelo endereço de memória
    - Algoritmo SHA-256 sobre UTF-8

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - Nenhuma mutação ocorre sobre o input
"""

import json
import hashlib
from collections.abc import Mapping
from typing import Any


def _opaque_marker(value: Any) -> str:
    kind = type(value)
    name = getattr(value, "__qualname__", None) if callable(value) else None
    marker = f"{kind.__module__}.{kind.__qualname__}"
    if name:
        marker = f"{marker}:{name}"
    return f"<{marker}>"


def compute_config_hash(config: Mapping) -> str:
    """
    Gera um hash determinístico da configuração composta.

    Args:
        config (Mapping): Configuração resultante da composição.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um mapeamento.
    """

    if not isinstance(config, Mapping):
        raise TypeError(
            f"Config para hashing deve ser Mapping, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_opaque_marker,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
