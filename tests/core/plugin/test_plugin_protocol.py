# tests/core/plugin/test_plugin_protocol.py
"""
Testes do contrato de plugin (duck typing).

Os testes asseguram que:
- funções, partials e instâncias com `__call__` satisfazem o protocolo
- `describe_plugin` produz identidades legíveis e estáveis
- `accepts_plugin_call` rejeita não-callables e assinaturas incompatíveis
"""

import functools

import pytest

try:
    from atlas_compose.core.plugin.plugin import ConfigPlugin, accepts_plugin_call, describe_plugin
except Exception as e:  # noqa: BLE001
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing plugin contract module. Implement:\n"
            "- src/atlas_compose/core/plugin/plugin.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


def with_output(config, context):
    return {**config, "output": {"path": "dist"}}


class CallablePlugin:
    def __call__(self, config, context):
        return dict(config)


def _with_key(config, context, *, key):
    return {**config, key: True}


def test_plugins_conform_to_protocol():
    _require_imports()
    assert isinstance(with_output, ConfigPlugin)
    assert isinstance(CallablePlugin(), ConfigPlugin)
    assert isinstance(functools.partial(_with_key, key="x"), ConfigPlugin)
    assert not isinstance(42, ConfigPlugin)


def test_describe_plugin():
    _require_imports()
    assert describe_plugin(with_output) == "with_output"
    assert describe_plugin(CallablePlugin()) == "CallablePlugin"
    assert describe_plugin(functools.partial(_with_key, key="x")) == "partial(_with_key)"
    assert describe_plugin(lambda c, ctx: c).endswith("<lambda>")


def test_accepts_plugin_call():
    _require_imports()
    assert accepts_plugin_call(with_output, {}, None)
    assert accepts_plugin_call(CallablePlugin(), {}, None)
    assert accepts_plugin_call(functools.partial(_with_key, key="x"), {}, None)
    assert not accepts_plugin_call("not a plugin", {}, None)
    assert not accepts_plugin_call(lambda config: config, {}, None)
    assert not accepts_plugin_call(lambda config, context, required: config, {}, None)
