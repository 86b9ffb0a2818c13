# src/atlas_compose/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política oficial de deep-merge utilizada pelo
Atlas Compose para que plugins possam sobrepor seus defaults por baixo
(ou por cima) da configuração recebida de plugins anteriores.

Política de merge (v1):
    - mapeamento → merge recursivo por chave
    - lista/tupla → sobrescrita total (sem merge elemento a elemento)
    - escalar ou objeto opaco → sobrescrita direta
    - mapeamento x não-mapeamento → erro estrutural explícito
    - fontes aplicadas da esquerda para a direita (a última vence)

Precedência explícita por chave:
    `policies` associa caminhos pontuados ("build.rollupOptions") a uma
    `MergePolicy`, substituindo a dependência da ordem textual de campos.

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - Objetos opacos (instâncias de plugins de build, callables) são
      compartilhados por referência, nunca copiados

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Chaves presentes apenas no target ou apenas em uma fonte são preservadas
    - Conflitos estruturais interrompem o merge

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não valida semântica de domínio
    - Não concatena listas (o chamador concatena antes, se quiser)
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .errors import MergeTypeMismatch


class MergePolicy(str, Enum):
    """
    Política de precedência aplicada a uma chave específica durante o merge.

    Valores:
        - RECURSE: comportamento padrão (mapeamentos recursivos, demais sobrescritos)
        - PREFER_INCOMING: o valor da fonte substitui integralmente o existente
        - PREFER_EXISTING: o valor existente é mantido; a fonte só preenche ausências
        - REPLACE_ON_CONFLICT: mapeamento sobre mapeamento é mesclado; qualquer
          outra combinação é sobrescrita pela fonte, sem MergeTypeMismatch
          (chaves que a ferramenta aceita como objeto ou como escalar/função)
    """

    RECURSE = "recurse"
    PREFER_INCOMING = "prefer_incoming"
    PREFER_EXISTING = "prefer_existing"
    REPLACE_ON_CONFLICT = "replace_on_conflict"


PolicyMap = Mapping[str, Union[MergePolicy, str]]


def is_mapping(value: Any) -> bool:
    """Indica se o valor é um mapeamento estrutural (dict-like)."""
    return isinstance(value, Mapping)


def _clone(value: Any) -> Any:
    # mapeamentos e listas são realocados; o resto é compartilhado
    if isinstance(value, Mapping):
        return {k: _clone(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_clone(v) for v in value]
    return value


def _normalize_policies(policies: Optional[PolicyMap]) -> Dict[str, MergePolicy]:
    return {path: MergePolicy(policy) for path, policy in (policies or {}).items()}


def _merge_into(
    base: Dict[Any, Any],
    source: Mapping,
    path: List[str],
    policies: Dict[str, MergePolicy],
) -> Dict[Any, Any]:
    # `base` pertence ao resultado (já clonado) e pode ser escrito
    for key, incoming in source.items():
        key_path = path + [str(key)]
        policy = policies.get(".".join(key_path), MergePolicy.RECURSE)
        existing = base.get(key)

        if policy is MergePolicy.PREFER_EXISTING:
            if existing is None:
                base[key] = _clone(incoming)
            continue

        if policy is MergePolicy.PREFER_INCOMING:
            base[key] = _clone(incoming)
            continue

        if policy is MergePolicy.REPLACE_ON_CONFLICT and not (is_mapping(existing) and is_mapping(incoming)):
            base[key] = _clone(incoming)
            continue

        # mapeamento -> merge recursivo
        if is_mapping(incoming):
            if existing is None:
                base[key] = _merge_into({}, incoming, key_path, policies)
            elif is_mapping(existing):
                base[key] = _merge_into(existing, incoming, key_path, policies)
            else:
                raise MergeTypeMismatch(
                    path=key_path,
                    existing_type=type(existing).__name__,
                    incoming_type=type(incoming).__name__,
                )
            continue

        # None é remoção explícita; qualquer outro valor sobre mapeamento é conflito
        if is_mapping(existing) and incoming is not None:
            raise MergeTypeMismatch(
                path=key_path,
                existing_type=type(existing).__name__,
                incoming_type=type(incoming).__name__,
            )

        # lista / escalar / opaco -> sobrescrita total
        base[key] = _clone(incoming)

    return base


def deep_merge(
    target: Mapping,
    *sources: Optional[Mapping],
    policies: Optional[PolicyMap] = None,
) -> Dict[Any, Any]:
    """
    Combina um target com uma ou mais fontes, produzindo uma nova configuração.

    As fontes são aplicadas da esquerda para a direita: o efeito de cada uma
    é incorporado ao resultado parcial antes da próxima. Para chaves
    sobrepostas, a última fonte vence (o merge não é comutativo).

    Decisões arquiteturais:
        - O merge é puramente funcional (target e fontes não são mutados)
        - Fontes `None` são ignoradas (no-op)
        - Sem fontes, o retorno é uma cópia estrutural igual ao target
        - `None` em uma chave alvo é tratado como ausência ao receber mapeamento
        - Conflito mapeamento x não-mapeamento levanta `MergeTypeMismatch`,
          salvo quando uma política explícita governa a chave

    Args:
        target (Mapping): Estrutura base (ex.: defaults de um plugin).
        *sources (Mapping | None): Estruturas sobrepostas em ordem.
        policies (Mapping[str, MergePolicy] | None): Política por caminho pontuado.

    Returns:
        Dict[Any, Any]: Novo dicionário resultante do merge.

    Raises:
        MergeTypeMismatch: Se target/fonte não forem mapeamentos no nível raiz
            ou se ocorrer conflito estrutural em alguma chave.
    """
    if not is_mapping(target):
        raise MergeTypeMismatch(
            path=["<root>"],
            existing_type=type(target).__name__,
            incoming_type="Mapping",
        )

    policy_map = _normalize_policies(policies)
    result: Dict[Any, Any] = _clone(target)

    for source in sources:
        if source is None:
            continue
        if not is_mapping(source):
            raise MergeTypeMismatch(
                path=["<root>"],
                existing_type=type(result).__name__,
                incoming_type=type(source).__name__,
            )
        result = _merge_into(result, source, [], policy_map)

    return result
