# src/atlas_compose/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Compose.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o merge de configurações e o carregamento de arquivos de configuração.

As exceções aqui definidas representam **violações estruturais
explícitas**, e não erros genéricos de execução.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - `ConfigError` herda de `ComposeError`, permitindo captura única

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do Composer
"""

from __future__ import annotations

from typing import List

from atlas_compose.core.errors import (
    ComposeErrorPayload,
    config_file_error,
    merge_type_mismatch,
)
from atlas_compose.core.exceptions import ComposeError


class ConfigError(ComposeError):
    """
    Exceção base para erros relacionados à configuração do Atlas Compose.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falhas estruturais e falhas de plugin
    """

    code = "CONFIG_ERROR"


class MergeTypeMismatch(ConfigError):
    """
    Exceção levantada quando o deep-merge encontra, na mesma chave,
    um mapeamento de um lado e um valor não estrutural do outro.

    Exemplo de conflito:
        - target: {"build": {"outDir": "dist"}}
        - source: {"build": "dist"}

    Decisões arquiteturais:
        - Mapeamento x não-mapeamento nunca é resolvido silenciosamente
        - Uma MergePolicy explícita (PREFER_INCOMING/PREFER_EXISTING)
          é o caminho para sobrescrever a chave deliberadamente

    Invariantes:
        - Nenhum merge parcial é devolvido em caso de conflito
    """

    code = "MERGE_TYPE_MISMATCH"

    def __init__(self, *, path: List[str], existing_type: str, incoming_type: str) -> None:
        dotted = ".".join(path)
        super().__init__(
            f"Conflito de tipo na chave '{dotted}': {existing_type} vs {incoming_type}",
            details={
                "path": dotted,
                "existing_type": existing_type,
                "incoming_type": incoming_type,
            },
        )
        self.path = list(path)
        self.existing_type = existing_type
        self.incoming_type = incoming_type

    def to_payload(self) -> ComposeErrorPayload:
        return merge_type_mismatch(
            path=self.path,
            existing_type=self.existing_type,
            incoming_type=self.incoming_type,
        )


class ConfigFileError(ConfigError):
    """Base para falhas de carregamento de arquivo de configuração."""

    code = "CONFIG_FILE_ERROR"

    def __init__(self, message: str, *, path: str, reason: str) -> None:
        super().__init__(message, details={"path": path, "reason": reason})
        self.path = path
        self.reason = reason

    def to_payload(self) -> ComposeErrorPayload:
        return config_file_error(path=self.path, reason=self.reason)


class ConfigFileNotFoundError(ConfigFileError):
    """
    Exceção levantada quando um arquivo de configuração obrigatório
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigFileError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigFileError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um mapeamento.

    Listas ou valores escalares no root são inválidos.
    """
