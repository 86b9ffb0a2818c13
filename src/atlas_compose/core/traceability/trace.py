# src/atlas_compose/core/traceability/trace.py
"""
Composition Trace v1 — registro de diagnóstico de uma composição.

Este módulo define a estrutura e as operações canônicas do trace de
composição: o único canal de diagnóstico do Composer.

O trace consolida, de forma determinística e auditável:
    - metadados da run (nome da cadeia, início, versão)
    - estado de cada plugin, indexado pela posição na cadeia
    - Event Log ordenado de eventos explícitos
    - hash da configuração final, quando a composição conclui

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente
    - Toda mutação ocorre por chamadas explícitas da API
    - A ordem do Event Log reflete a ordem real de aplicação dos plugins
    - O trace é serializável e reconstruível (round-trip)

Decisões arquiteturais:
    - UTC é o timezone canônico para todos os timestamps
    - O formato de persistência é JSON determinístico
    - Plugins são indexados pela posição (string), não pelo nome,
      já que a mesma fábrica pode aparecer mais de uma vez na cadeia

Limites explícitos:
    - Não aplica plugins
    - Não decide políticas de falha
    - O trace não participa da configuração composta
    - Um trace registra uma única run (ver `compose_started`)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from atlas_compose.core.exceptions import TraceReuseError


def _ensure_tzaware_utc(dt: datetime) -> datetime:
    """Normaliza um timestamp para timezone-aware em UTC (naive é assumido UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return _ensure_tzaware_utc(dt).isoformat()


def _ms_between(start_iso: Optional[str], end: datetime) -> Optional[int]:
    if not start_iso:
        return None
    start = _ensure_tzaware_utc(datetime.fromisoformat(start_iso))
    return max(0, int((_ensure_tzaware_utc(end) - start).total_seconds() * 1000))


@dataclass
class CompositionTrace:
    """
    Trace v1 — registro de diagnóstico de uma run de composição.

    Campos principais:
        - run: metadados da run (name, started_at, atlas_compose_version, status)
        - plugins: estado incremental de cada plugin, por posição
        - events: Event Log ordenado de eventos explícitos

    Invariantes:
        - `plugins` é sempre um dicionário indexado pela posição
        - `events` é sempre uma lista ordenada
        - A estrutura completa é serializável em JSON
    """

    run: Dict[str, Any]
    plugins: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run": dict(self.run),
            "plugins": {k: dict(v) for k, v in self.plugins.items()},
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompositionTrace":
        return cls(
            run=dict(data.get("run", {})),
            plugins={k: dict(v) for k, v in (data.get("plugins", {}) or {}).items()},
            events=[dict(e) for e in (data.get("events", []) or [])],
        )

    def events_of(self, event_type: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("event_type") == event_type]


def create_trace(
    *,
    name: str,
    started_at: Optional[datetime] = None,
    version: Optional[str] = None,
) -> CompositionTrace:
    """
    Cria o trace inicial de uma composição.

    ⚠️ Importante: esta função **não emite eventos implicitamente**.
    O Event Log inicia vazio e só é preenchido pelo Composer
    (ou por chamadas explícitas a `add_event`).
    """
    if version is None:
        from atlas_compose import __version__ as version

    started = _ensure_tzaware_utc(started_at or datetime.now(timezone.utc))
    return CompositionTrace(
        run={
            "name": name,
            "created_at": _iso(started),
            "atlas_compose_version": version,
        },
        plugins={},
        events=[],
    )


def add_event(
    trace: CompositionTrace,
    *,
    event_type: str,
    ts: datetime,
    position: Optional[int] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """Adiciona um evento explícito ao Event Log, preservando a ordem de chamada."""
    ev: Dict[str, Any] = {"event_type": event_type, "timestamp": _iso(ts)}
    if position is not None:
        ev["position"] = position
    if payload is not None:
        ev["payload"] = payload
    trace.events.append(ev)


def compose_started(
    trace: CompositionTrace,
    *,
    ts: datetime,
    plugin_names: List[str],
    context: Dict[str, Any],
) -> None:
    """
    Abre a run no trace.

    Um trace registra exatamente uma run: `plugins` é indexado pela posição
    na cadeia, então reutilizá-lo (nova invocação do mesmo plugin combinado
    ou composição aninhada com o mesmo trace) misturaria runs distintas.

    Raises:
        TraceReuseError: Se o trace já registrou uma run.
    """
    if "started_at" in trace.run:
        raise TraceReuseError(
            f"Trace '{trace.run.get('name')}' já registrou uma run",
            details={"name": trace.run.get("name"), "started_at": trace.run["started_at"]},
            hint="Crie um trace por invocação com create_trace().",
        )
    trace.run.update({"status": "running", "started_at": _iso(ts), "size": len(plugin_names)})
    add_event(
        trace,
        event_type="compose_started",
        ts=ts,
        payload={"plugins": list(plugin_names), "context": context},
    )


def plugin_started(trace: CompositionTrace, *, position: int, plugin: str, ts: datetime) -> None:
    trace.plugins[str(position)] = {
        "position": position,
        "plugin": plugin,
        "status": "running",
        "started_at": _iso(ts),
    }
    add_event(trace, event_type="plugin_started", ts=ts, position=position, payload={"plugin": plugin})


def plugin_finished(trace: CompositionTrace, *, position: int, ts: datetime) -> None:
    entry = trace.plugins.setdefault(str(position), {"position": position})
    entry.update(
        {
            "status": "applied",
            "finished_at": _iso(ts),
            "duration_ms": _ms_between(entry.get("started_at"), ts),
        }
    )
    add_event(trace, event_type="plugin_applied", ts=ts, position=position)


def plugin_failed(
    trace: CompositionTrace,
    *,
    position: int,
    ts: datetime,
    error: Dict[str, Any],
) -> None:
    entry = trace.plugins.setdefault(str(position), {"position": position})
    entry.update(
        {
            "status": "failed",
            "finished_at": _iso(ts),
            "duration_ms": _ms_between(entry.get("started_at"), ts),
            "error": error,
        }
    )
    trace.run["status"] = "failed"
    add_event(trace, event_type="plugin_failed", ts=ts, position=position, payload={"error": error})


def compose_finished(trace: CompositionTrace, *, ts: datetime, config_hash: str) -> None:
    trace.run.update({"status": "succeeded", "finished_at": _iso(ts), "config_hash": config_hash})
    add_event(trace, event_type="compose_finished", ts=ts, payload={"config_hash": config_hash})


def save_trace(trace: CompositionTrace, path: Union[str, Path]) -> Path:
    """Persiste o trace em JSON determinístico (chaves ordenadas, UTF-8)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(
        json.dumps(trace.to_dict(), ensure_ascii=False, sort_keys=True, indent=2, default=str),
        encoding="utf-8",
    )
    return p


def load_trace(path: Union[str, Path]) -> CompositionTrace:
    p = Path(path)
    return CompositionTrace.from_dict(json.loads(p.read_text(encoding="utf-8")))
