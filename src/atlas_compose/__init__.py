# src/atlas_compose/__init__.py
"""
Atlas Compose — composição determinística de plugins de configuração.

Este pacote raiz define o namespace público do Atlas Compose: um motor
genérico que recebe uma lista ordenada de plugins puros
`(config, context) -> config` e produz um único plugin que encadeia
todos eles, na ordem declarada.

Princípios centrais:
    - A ordem da cadeia é significativa e nunca é alterada
    - O contexto é imutável e compartilhado por todos os plugins de uma run
    - Qualquer violação de contrato aborta a composição (fail-fast)
    - Defaults são sobrepostos via deep-merge puro, com precedência explícita

Arquitetura em alto nível:
    - core.config       → merge, hashing e loader de arquivos
    - core.plugin       → contrato de plugin, contexto e registry
    - core.engine       → Composer
    - core.traceability → trace de diagnóstico
    - integrations      → bindings por ferramenta (vite, rsbuild, rspack)

Limites explícitos:
    - Não valida semântica de domínio da configuração
    - Não executa ferramentas de build
"""
__version__ = "0.1.0"

from .core.config.merge import MergePolicy, deep_merge
from .core.config.loader import load_config, load_config_file, load_context_file, with_config_file
from .core.engine.composer import ComposedPlugin, compose_plugins, create_compose_plugins
from .core.exceptions import (
    ComposeError,
    ContractViolation,
    InvalidContextError,
    PluginExecutionError,
    TraceReuseError,
)
from .core.config.errors import ConfigError, MergeTypeMismatch
from .core.plugin.context import PluginContext
from .core.plugin.plugin import ConfigPlugin, ConfigPluginFn, describe_plugin
from .core.plugin.registry import PluginRegistry
from .core.plugin.types import Mode
from .core.traceability.trace import CompositionTrace, create_trace

__all__ = [
    "__version__",
    "ComposeError",
    "ComposedPlugin",
    "CompositionTrace",
    "ConfigError",
    "ConfigPlugin",
    "ConfigPluginFn",
    "ContractViolation",
    "InvalidContextError",
    "MergePolicy",
    "MergeTypeMismatch",
    "Mode",
    "PluginContext",
    "PluginExecutionError",
    "PluginRegistry",
    "TraceReuseError",
    "compose_plugins",
    "create_compose_plugins",
    "create_trace",
    "deep_merge",
    "describe_plugin",
    "load_config",
    "load_config_file",
    "load_context_file",
    "with_config_file",
]
