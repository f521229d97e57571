import pytest

from monad_mcp.catalog import build_default_registry
from monad_mcp.outcome import Success
from monad_mcp.registry import DuplicateToolError, RegistryFrozenError, ToolRegistry
from monad_mcp.schema import ParamSpec


async def _noop(**_kwargs):
    return Success("ok")


def test_register_and_lookup():
    registry = ToolRegistry()
    tool = registry.register("echo", "Echo", {"text": ParamSpec(type="string")}, _noop)
    assert registry.lookup("echo") is tool
    assert registry.lookup("missing") is None
    assert "echo" in registry
    assert len(registry) == 1


def test_duplicate_name_rejected():
    registry = ToolRegistry()
    registry.register("echo", "Echo", {}, _noop)
    with pytest.raises(DuplicateToolError):
        registry.register("echo", "Echo again", {}, _noop)


def test_frozen_registry_rejects_registration():
    registry = ToolRegistry().freeze()
    assert registry.frozen
    with pytest.raises(RegistryFrozenError):
        registry.register("late", "Too late", {}, _noop)


def test_registration_order_preserved():
    registry = ToolRegistry()
    for name in ("b", "a", "c"):
        registry.register(name, name, {}, _noop)
    assert registry.names() == ["b", "a", "c"]
    assert [tool.name for tool in registry] == ["b", "a", "c"]


def test_params_are_read_only():
    registry = ToolRegistry()
    tool = registry.register("echo", "Echo", {"text": ParamSpec(type="string")}, _noop)
    with pytest.raises(TypeError):
        tool.params["other"] = ParamSpec(type="string")


def test_handler_kwargs_renames_wire_names():
    registry = ToolRegistry()
    tool = registry.register(
        "send",
        "Send",
        {"privateKey": ParamSpec(type="string", kwarg="private_key"), "to": ParamSpec(type="string")},
        _noop,
    )
    assert tool.handler_kwargs({"privateKey": "k", "to": "t"}) == {"private_key": "k", "to": "t"}


def test_default_catalog():
    registry = build_default_registry()
    assert registry.frozen
    assert registry.names() == [
        "get-mon-balance",
        "get-gas-price",
        "get-transaction-count",
        "sign-and-send-transaction",
    ]


def test_default_catalog_schemas():
    registry = build_default_registry()
    balance = registry.lookup("get-mon-balance").describe()
    assert balance["description"] == "Get MON balance for an address on Monad testnet"
    assert balance["inputSchema"]["required"] == ["address"]

    gas = registry.lookup("get-gas-price").describe()
    assert gas["inputSchema"]["properties"] == {}
    assert gas["inputSchema"]["required"] == []

    send = registry.lookup("sign-and-send-transaction").describe()
    assert send["inputSchema"]["required"] == ["privateKey", "to", "value"]
    assert "data" in send["inputSchema"]["properties"]
