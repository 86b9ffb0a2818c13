# src/atlas_compose/integrations/shared.py
"""
Utilitários compartilhados entre integrações de ferramentas de build.

Este módulo reúne valores e construtores reutilizados pelos plugins de
defaults de cada integração (vite, rsbuild, rspack):

    - COMMON_EXTENSIONS      → extensões resolvidas por padrão
    - create_common_aliases  → aliases "@" e "~" apontando para a raiz do código
    - create_common_rules    → construtores de regras de módulo por tipo de arquivo
    - get_env_vars           → variáveis de ambiente prefixadas, prontas para `define`
    - with_env               → plugin que injeta essas variáveis na configuração

Decisões arquiteturais:
    - O ambiente é injetado explicitamente (`environ`); `os.environ` é
      apenas o default quando nada é informado
    - Padrões de arquivo são expressões regulares compiladas, tratadas
      como objetos opacos pelo merge
"""

from __future__ import annotations

import json
import os
import re
from typing import Any, Callable, Dict, Mapping, Optional

from atlas_compose.core.config.merge import deep_merge
from atlas_compose.core.plugin.context import PluginContext
from atlas_compose.core.plugin.plugin import ConfigPluginFn


COMMON_EXTENSIONS = [".tsx", ".ts", ".jsx", ".js", ".json"]

# extensões de script que integrações React reordenam para o início
SCRIPT_EXTENSIONS = [".tsx", ".ts", ".jsx", ".js"]

TS_JS_PATTERN = re.compile(r"\.(js|jsx|ts|tsx)$")
NODE_MODULES_PATTERN = re.compile(r"node_modules")


def create_common_aliases(source_root: str = "src") -> Dict[str, str]:
    return {
        "@": f"/{source_root}",
        "~": f"/{source_root}",
    }


def create_common_rules() -> Dict[str, Callable[..., Dict[str, Any]]]:
    """Construtores de regras de módulo; `options` sobrepõe os campos padrão."""

    def create_ts_js_rule(**options: Any) -> Dict[str, Any]:
        return {"test": TS_JS_PATTERN, "exclude": NODE_MODULES_PATTERN, **options}

    def create_css_rule(**options: Any) -> Dict[str, Any]:
        return {"test": re.compile(r"\.css$"), **options}

    def create_sass_rule(**options: Any) -> Dict[str, Any]:
        return {"test": re.compile(r"\.s[ac]ss$"), **options}

    def create_asset_rule(**options: Any) -> Dict[str, Any]:
        return {
            "test": re.compile(r"\.(png|jpe?g|gif|svg|woff|woff2|eot|ttf|otf)$"),
            "type": "asset",
            **options,
        }

    return {
        "ts_js": create_ts_js_rule,
        "css": create_css_rule,
        "sass": create_sass_rule,
        "asset": create_asset_rule,
    }


def merge_extensions(existing: Optional[list]) -> list:
    """COMMON_EXTENSIONS seguidas das extensões extras já configuradas."""
    extras = [ext for ext in (existing or []) if ext not in SCRIPT_EXTENSIONS and ext not in COMMON_EXTENSIONS]
    return list(COMMON_EXTENSIONS) + extras


def get_env_vars(
    prefix: str = "REACT_APP_",
    systemvars: bool = True,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Seleciona variáveis de ambiente com o prefixo informado.

    Retorna entradas no formato de `define`:
    `{"process.env.REACT_APP_X": "\"valor\""}` (valor serializado em JSON).
    """
    env_vars: Dict[str, str] = {}
    if not systemvars:
        return env_vars

    source = os.environ if environ is None else environ
    for key in sorted(source):
        if key.startswith(prefix):
            env_vars[f"process.env.{key}"] = json.dumps(source[key])
    return env_vars


def with_env(
    *,
    prefix: str = "REACT_APP_",
    variables: Optional[Mapping[str, str]] = None,
    systemvars: bool = True,
    define_key: str = "define",
    environ: Optional[Mapping[str, str]] = None,
) -> ConfigPluginFn:
    """
    Plugin que injeta variáveis de ambiente na seção `define` da configuração.

    Precedência: variáveis do ambiente < `variables` explícitas < valores
    já presentes em `config[define_key]`.
    """

    def env_plugin(config: Mapping[str, Any], context: Optional[PluginContext] = None):
        injected = get_env_vars(prefix, systemvars, environ)
        for key, value in (variables or {}).items():
            injected[f"process.env.{key}"] = json.dumps(value)
        return deep_merge(config, {define_key: deep_merge(injected, config.get(define_key) or {})})

    env_plugin.__name__ = "with_env"
    return env_plugin
