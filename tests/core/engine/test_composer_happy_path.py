# tests/core/engine/test_composer_happy_path.py
"""
Testes do caminho feliz do Composer.

Os testes asseguram que:
- zero plugins é a identidade (o mesmo objeto é devolvido)
- plugins são aplicados na ordem exata fornecida
- todos os plugins recebem o mesmo objeto de contexto
- a saída de cada plugin é a entrada do seguinte
- o plugin combinado é ele próprio um plugin (composição aninhada)
- contextos em forma de Mapping são convertidos pelo tipo vinculado

Limites explícitos:
    - Não valida política de falha (ver test_composer_fail_fast.py)
"""

import pytest

try:
    from atlas_compose.core.engine.composer import ComposedPlugin, compose_plugins, create_compose_plugins
    from atlas_compose.core.plugin.context import PluginContext
    from atlas_compose.core.plugin.types import Mode
    from atlas_compose.integrations.vite.types import ViteContext
except Exception as e:  # noqa: BLE001
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing composer module. Implement:\n"
            "- src/atlas_compose/core/engine/composer.py (compose_plugins)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_zero_plugins_is_identity(dummy_ctx):
    _require_imports()
    cfg = {"a": 1}
    assert compose_plugins()(cfg, dummy_ctx) is cfg


def test_missing_initial_config_starts_empty():
    _require_imports()
    assert compose_plugins()() == {}


def test_plugins_run_in_order_with_same_context(recording_plugin, dummy_ctx):
    _require_imports()
    make, calls = recording_plugin
    composed = compose_plugins(make("first"), make("second"), make("third"))

    out = composed({}, dummy_ctx)

    assert out == {"trail": ["first", "second", "third"]}
    assert [name for name, _, _ in calls] == ["first", "second", "third"]
    assert all(ctx is dummy_ctx for _, _, ctx in calls)
    # cada plugin recebe a saída do anterior
    assert calls[1][1] == {"trail": ["first"]}
    assert calls[2][1] == {"trail": ["first", "second"]}


def test_later_plugin_overrides_earlier(make_set_plugin, dummy_ctx):
    _require_imports()
    composed = compose_plugins(
        make_set_plugin("output.path", "dist"),
        make_set_plugin("output.path", "custom"),
    )
    assert composed({}, dummy_ctx) == {"output": {"path": "custom"}}


def test_initial_config_is_not_mutated(make_set_plugin, dummy_ctx):
    _require_imports()
    initial = {"output": {"clean": True}}
    out = compose_plugins(make_set_plugin("output.path", "dist"))(initial, dummy_ctx)
    assert out == {"output": {"clean": True, "path": "dist"}}
    assert initial == {"output": {"clean": True}}


def test_composed_plugin_is_a_plugin(make_set_plugin, recording_plugin, dummy_ctx):
    """Composição aninhada equivale à cadeia achatada."""
    _require_imports()
    make, calls = recording_plugin
    inner = compose_plugins(make("a"), make("b"), name="inner")
    outer = compose_plugins(inner, make("c"))
    flat = compose_plugins(make("a"), make("b"), make("c"))

    assert isinstance(inner, ComposedPlugin)
    assert outer({}, dummy_ctx) == flat({}, dummy_ctx)
    assert "inner" in repr(inner)


def test_context_defaults_when_missing(recording_plugin):
    _require_imports()
    make, calls = recording_plugin
    compose_plugins(make("only"))({})
    ctx = calls[0][2]
    assert isinstance(ctx, PluginContext)
    assert ctx.resolved_mode() is Mode.DEVELOPMENT


def test_mapping_context_uses_bound_context_type(recording_plugin):
    _require_imports()
    make, calls = recording_plugin
    compose_vite = create_compose_plugins(ViteContext)
    compose_vite(make("p"))({}, {"mode": "production", "command": "build"})

    ctx = calls[0][2]
    assert isinstance(ctx, ViteContext)
    assert ctx.command == "build"
    assert ctx.mode is Mode.PRODUCTION


def test_default_name_reflects_size():
    _require_imports()
    assert compose_plugins().__name__ == "composed[0]"
    assert compose_plugins(lambda c, ctx: c, name="chain").__name__ == "chain"


def test_other_context_type_is_rebuilt_as_bound_type(recording_plugin):
    """Contexto de outro tipo é reconstruído no tipo vinculado, preservando campos e extras."""
    _require_imports()
    make, calls = recording_plugin
    compose_vite = create_compose_plugins(ViteContext)
    given = PluginContext(mode="production", output_path="out", extra={"command": "build", "flag": 1})

    compose_vite(make("p"))({}, given)

    ctx = calls[0][2]
    assert isinstance(ctx, ViteContext)
    assert ctx.mode is Mode.PRODUCTION
    assert ctx.output_path == "out"
    assert ctx.command == "build"
    assert dict(ctx.extra) == {"flag": 1}


def test_bound_type_subclass_passes_through(recording_plugin):
    _require_imports()
    make, calls = recording_plugin
    given = ViteContext(mode="development", command="serve")
    compose_plugins(make("p"))({}, given)
    assert calls[0][2] is given
