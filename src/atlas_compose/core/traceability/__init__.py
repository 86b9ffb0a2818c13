# src/atlas_compose/core/traceability/__init__.py
"""
Rastreabilidade de composições.

    - trace → CompositionTrace, Event Log ordenado e persistência em JSON

O trace é opcional: o Composer só registra eventos quando um trace é
fornecido explicitamente na composição.
"""
