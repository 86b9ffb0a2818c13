# src/atlas_compose/core/config/__init__.py

"""
Camada de configuração do Atlas Compose.

Este pacote contém os utilitários responsáveis por mesclar, identificar
e carregar configurações.

Responsabilidades do pacote:
    - Deep-merge determinístico e puro, com política explícita por chave
    - Hash canônico da configuração composta
    - Carregamento de arquivos YAML/JSON (apenas quando solicitado)

Princípios fundamentais:
    - Configuração não contém lógica de domínio
    - Nenhuma heurística implícita durante merge
    - Conflitos estruturais são tratados como erro

Invariantes:
    - O resultado do merge é sempre um novo dicionário
    - Inputs nunca são mutados
"""
