# tests/integrations/test_shared_helpers.py
"""
Testes dos utilitários compartilhados entre integrações.

Os testes asseguram que:
- aliases e extensões comuns têm os valores esperados
- regras comuns aceitam sobreposição de campos
- variáveis de ambiente são filtradas por prefixo e serializadas em JSON
- `with_env` respeita a precedência ambiente < explícitas < existentes
"""

import pytest

try:
    from atlas_compose.core.plugin.context import PluginContext
    from atlas_compose.integrations.shared import (
        COMMON_EXTENSIONS,
        create_common_aliases,
        create_common_rules,
        get_env_vars,
        merge_extensions,
        with_env,
    )
except Exception as e:  # noqa: BLE001
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing shared integration helpers. Implement:\n"
            "- src/atlas_compose/integrations/shared.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


ENV = {"REACT_APP_API": "https://api", "REACT_APP_FLAG": "1", "HOME": "/root"}


def test_common_aliases_and_extensions():
    _require_imports()
    assert create_common_aliases() == {"@": "/src", "~": "/src"}
    assert create_common_aliases("app") == {"@": "/app", "~": "/app"}
    assert COMMON_EXTENSIONS == [".tsx", ".ts", ".jsx", ".js", ".json"]


def test_merge_extensions_keeps_extras_after_common():
    _require_imports()
    assert merge_extensions([".js", ".vue", ".json"]) == COMMON_EXTENSIONS + [".vue"]
    assert merge_extensions(None) == COMMON_EXTENSIONS


def test_common_rules_accept_overrides():
    _require_imports()
    rules = create_common_rules()
    assert set(rules) == {"ts_js", "css", "sass", "asset"}

    ts_rule = rules["ts_js"](loader="builtin:swc-loader")
    assert ts_rule["loader"] == "builtin:swc-loader"
    assert ts_rule["test"].search("main.tsx")
    assert ts_rule["exclude"].search("node_modules/react/index.js")

    asset = rules["asset"](type="asset/resource")
    assert asset["type"] == "asset/resource"
    assert rules["sass"]()["test"].search("theme.scss")


def test_get_env_vars_filters_by_prefix():
    _require_imports()
    assert get_env_vars(environ=ENV) == {
        "process.env.REACT_APP_API": '"https://api"',
        "process.env.REACT_APP_FLAG": '"1"',
    }
    assert get_env_vars(prefix="HO", environ=ENV) == {"process.env.HOME": '"/root"'}
    assert get_env_vars(systemvars=False, environ=ENV) == {}


def test_get_env_vars_defaults_to_process_environment(monkeypatch):
    _require_imports()
    monkeypatch.setenv("ATLAS_TEST_VALUE", "x")
    assert get_env_vars(prefix="ATLAS_TEST_") == {"process.env.ATLAS_TEST_VALUE": '"x"'}


def test_with_env_precedence():
    _require_imports()
    plugin = with_env(variables={"REACT_APP_FLAG": "explicit"}, environ=ENV)
    config = {"define": {"process.env.REACT_APP_API": '"existing"'}, "mode": "production"}

    out = plugin(config, PluginContext())

    assert out["define"] == {
        "process.env.REACT_APP_API": '"existing"',
        "process.env.REACT_APP_FLAG": '"explicit"',
    }
    assert out["mode"] == "production"
    assert config["define"] == {"process.env.REACT_APP_API": '"existing"'}
    assert plugin.__name__ == "with_env"


def test_with_env_custom_define_key():
    _require_imports()
    plugin = with_env(prefix="VITE_", define_key="globals", environ={"VITE_X": "1"})
    assert plugin({}, PluginContext()) == {"globals": {"process.env.VITE_X": '"1"'}}
