# src/atlas_compose/core/config/loader.py
"""
Loader canônico de arquivos de configuração do Atlas Compose.

O Composer nunca realiza I/O. Este módulo é o único ponto do core que lê
arquivos, e só é acionado explicitamente: seja por quem monta a cadeia
(`load_config`, `load_context_file`), seja por um plugin que o chamador
decidiu compor (`with_config_file`).

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver defaults + overrides locais via deep-merge determinístico
    - Construir um PluginContext a partir de arquivo

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - Arquivos vazios são interpretados como dicionários vazios

Limites explícitos:
    - Não valida semântica de domínio
    - Não infere formato por conteúdo
    - Não interage com o Composer
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, Union
import json

import yaml  # PyYAML

from atlas_compose.core.plugin.context import PluginContext
from atlas_compose.core.plugin.plugin import ConfigPluginFn

from .merge import PolicyMap, deep_merge
from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


PathLike = Union[str, Path]


def load_config_file(path: PathLike) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Args:
        path (str | Path): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um mapeamento.
    """
    file = Path(path)
    if not file.exists():
        raise ConfigFileNotFoundError(
            f"Arquivo de configuração não encontrado: {file}",
            path=str(file),
            reason="not_found",
        )

    suffix = file.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with file.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {file.suffix}",
            path=str(file),
            reason="unsupported_format",
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}",
            path=str(file),
            reason="invalid_root_type",
        )

    return data


def load_config(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Carrega defaults obrigatórios e, quando presente, o override local.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional; se o caminho não existir, é ignorado
        - Quando presente, o local sempre tem prioridade sobre defaults

    Raises:
        ConfigFileNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        MergeTypeMismatch: Se ocorrer conflito estrutural durante o merge.
    """
    defaults = load_config_file(defaults_path)

    if local_path is not None and Path(local_path).exists():
        return deep_merge(defaults, load_config_file(local_path))

    return defaults


def with_config_file(
    path: PathLike,
    *,
    required: bool = True,
    policies: Optional[PolicyMap] = None,
) -> ConfigPluginFn:
    """
    Fábrica de plugin que sobrepõe o conteúdo de um arquivo à configuração recebida.

    O arquivo é lido no momento da invocação do plugin, não na construção
    da cadeia. Com `required=False`, um arquivo ausente torna o plugin
    uma identidade.
    """
    file = Path(path)

    def config_file_plugin(config: Mapping[str, Any], context: Optional[PluginContext] = None):
        if not required and not file.exists():
            return config
        return deep_merge(config, load_config_file(file), policies=policies)

    config_file_plugin.__name__ = f"with_config_file({file.name})"
    return config_file_plugin


def load_context_file(
    path: PathLike,
    *,
    context_cls: Type[PluginContext] = PluginContext,
) -> PluginContext:
    """Constrói um contexto (ou subclasse de integração) a partir de YAML/JSON."""
    return context_cls.from_mapping(load_config_file(path))
