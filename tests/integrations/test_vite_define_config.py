# tests/integrations/test_vite_define_config.py
"""
Testes de `define_config` e `create_base_config` da integração Vite.

Os testes asseguram que:
- `define_config` devolve uma função `env -> config`
- o ambiente Vite (camelCase) é convertido em `ViteContext`
- a cadeia parte de uma configuração vazia
"""

import pytest

try:
    from atlas_compose.core.traceability.trace import create_trace
    from atlas_compose.integrations.vite import (
        ViteContext,
        context_from_env,
        create_base_config,
        define_config,
        with_base,
        with_react,
    )
except Exception as e:  # noqa: BLE001
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing vite integration. Implement:\n"
            "- src/atlas_compose/integrations/vite/compose.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_context_from_env():
    _require_imports()
    ctx = context_from_env({"mode": "production", "command": "build", "isSsrBuild": True, "isPreview": False})
    assert isinstance(ctx, ViteContext)
    assert ctx.command == "build"
    assert ctx.is_ssr_build is True
    assert ctx.is_preview is False


def test_define_config_returns_env_function():
    _require_imports()
    seen = []

    def spy(config, context):
        seen.append((config, context))
        return config

    config_fn = define_config(spy, with_base(), with_react())
    cfg = config_fn({"mode": "production", "command": "build"})

    assert seen[0][0] == {}
    assert seen[0][1].command == "build"
    assert cfg["mode"] == "production"
    assert cfg["build"]["minify"] is True
    assert "react" in cfg["optimizeDeps"]["include"]


def test_define_config_records_trace():
    _require_imports()
    trace = create_trace(name="vite", version="x")
    define_config(with_base(), trace=trace)({"mode": "development"})
    assert trace.run["status"] == "succeeded"
    assert trace.events[1]["payload"]["plugin"] == "vite.with_base"


def test_define_config_without_env_uses_defaults():
    _require_imports()
    assert define_config()() == {}


def test_create_base_config():
    _require_imports()
    cfg = create_base_config(ViteContext(mode="production"))
    assert cfg["mode"] == "production"
    assert cfg["build"] == {"outDir": "dist", "sourcemap": False, "minify": True, "target": "es2015"}
    assert cfg["server"] == {"port": 3000, "host": True}
    assert create_base_config()["mode"] == "development"
