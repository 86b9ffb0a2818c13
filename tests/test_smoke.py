# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Atlas Compose.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o pacote pode ser importado sem falhas estruturais
- a API pública declarada em `__all__` existe de fato
- o ambiente de testes (pytest) está funcional

Invariantes:
    - Estes testes devem sempre passar em um setup correto
    - Não dependem de filesystem, I/O ou plugins reais

Limites explícitos:
    - Não testar lógica de composição ou merge
    - Não acumular asserts funcionais
"""


def test_smoke():
    """Sentinela mínima de integridade do ambiente de testes."""
    assert True


def test_public_api_is_importable():
    """Todo nome exportado pelo pacote raiz deve existir."""
    import atlas_compose

    for name in atlas_compose.__all__:
        assert hasattr(atlas_compose, name), name

    assert isinstance(atlas_compose.__version__, str)


def test_integrations_are_importable():
    """As três integrações expõem `define_config` e `with_base`."""
    from atlas_compose.integrations import rsbuild, rspack, vite

    for integration in (vite, rsbuild, rspack):
        assert callable(integration.define_config)
        assert callable(integration.with_base)
