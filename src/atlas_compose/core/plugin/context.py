# src/atlas_compose/core/plugin/context.py
"""
Contexto imutável de uma composição de plugins.

Este módulo define o `PluginContext`, o conjunto de parâmetros ambientes
passado, sem alteração, a todos os plugins de uma mesma run.

Vocabulário reconhecido:
    - mode          → development | production | none
    - project_root  → raiz do projeto
    - source_root   → raiz do código-fonte
    - output_path   → diretório de saída

Campos específicos de integração:
    - Integrações estendem o contexto por herança (ex.: `ViteContext`)
    - Campos não reconhecidos vivem em `extra`, exposto apenas para leitura

Princípios fundamentais:
    - O contexto é congelado (frozen) e compartilhado por referência
    - Plugins não propagam estado entre si pelo contexto, apenas pela config
    - O core nunca examina campos desconhecidos

Invariantes:
    - Todos os plugins de uma run recebem o mesmo objeto de contexto
    - `extra` é um mapeamento somente-leitura

Limites explícitos:
    - Não produz valores de contexto a partir do ambiente (env vars, cwd)
    - Não valida caminhos no filesystem
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .types import DEFAULT_MODE, DEFAULT_OUTPUT_PATH, Mode


def _camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)


@dataclass(frozen=True)
class PluginContext:
    """
    Contexto imutável compartilhado por todos os plugins de uma composição.

    Todos os campos são opcionais. Os valores padrão de consumo
    (mode=development, output_path="dist") são resolvidos por
    `resolved_mode()` e `resolved_output_path()`, e não gravados no
    contexto, para que plugins possam distinguir "não informado".

    Decisões arquiteturais:
        - `mode` aceita string na construção e é normalizado para `Mode`
        - `extra` é convertido para `MappingProxyType`
        - Subclasses de integração adicionam campos próprios com default None
    """

    mode: Optional[Mode] = None
    project_root: Optional[str] = None
    source_root: Optional[str] = None
    output_path: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.mode is not None:
            object.__setattr__(self, "mode", Mode.parse(self.mode))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra or {})))

    # -----------------------------
    # Defaults de consumo
    # -----------------------------
    def resolved_mode(self) -> Mode:
        return self.mode if self.mode is not None else DEFAULT_MODE

    def resolved_output_path(self) -> str:
        return self.output_path if self.output_path is not None else DEFAULT_OUTPUT_PATH

    @property
    def is_development(self) -> bool:
        return self.resolved_mode() is Mode.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.resolved_mode() is Mode.PRODUCTION

    # -----------------------------
    # Acesso genérico
    # -----------------------------
    def get(self, key: str, default: Any = None) -> Any:
        """Lê um campo reconhecido (se informado) ou, em seguida, um campo extra."""
        if key != "extra" and key in self._field_names():
            value = getattr(self, key)
            if value is not None:
                return value
        return self.extra.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Representação serializável (usada pelo trace)."""
        data: Dict[str, Any] = {}
        for name in self._field_names():
            if name == "extra":
                continue
            value = getattr(self, name)
            data[name] = value.value if isinstance(value, Mode) else value
        data["extra"] = dict(self.extra)
        return data

    @classmethod
    def _field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "PluginContext":
        """
        Separa um mapeamento bruto em campos reconhecidos e `extra`.

        Aceita nomes snake_case e camelCase (ex.: `outputPath`), já que
        contextos costumam vir de arquivos escritos para ferramentas JS.
        Um `extra` explícito no mapeamento é mesclado aos campos restantes.
        """
        aliases: Dict[str, str] = {}
        for name in cls._field_names():
            if name == "extra":
                continue
            aliases[name] = name
            aliases[_camel(name)] = name

        known: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if key == "extra" and isinstance(value, Mapping):
                extra.update(value)
            elif key in aliases:
                known[aliases[key]] = value
            else:
                extra[key] = value

        return cls(extra=extra, **known)
