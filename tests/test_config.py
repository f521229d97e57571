from monad_mcp.config import (
    MONAD_TESTNET_CHAIN_ID,
    MonadConfig,
    _load_base_fee_multiplier,
    _load_chain_id,
    _load_timeout,
)


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("MONAD_HTTP_TIMEOUT", "not-a-number")
    assert _load_timeout() == 30.0  # falls back to default on parse error


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("MONAD_HTTP_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_chain_id_defaults_to_testnet(monkeypatch):
    monkeypatch.delenv("MONAD_CHAIN_ID", raising=False)
    assert _load_chain_id() == MONAD_TESTNET_CHAIN_ID == 10143


def test_chain_id_accepts_hex_and_empty(monkeypatch):
    monkeypatch.setenv("MONAD_CHAIN_ID", "0x279f")
    assert _load_chain_id() == 10143
    monkeypatch.setenv("MONAD_CHAIN_ID", "")
    assert _load_chain_id() is None


def test_base_fee_multiplier(monkeypatch):
    monkeypatch.setenv("MONAD_BASE_FEE_MULTIPLIER", "1.5")
    assert _load_base_fee_multiplier() == 1.5
    monkeypatch.setenv("MONAD_BASE_FEE_MULTIPLIER", "0.5")
    assert _load_base_fee_multiplier() == 1.2
    monkeypatch.setenv("MONAD_BASE_FEE_MULTIPLIER", "fast")
    assert _load_base_fee_multiplier() == 1.2


def test_monad_config_units():
    cfg = MonadConfig(rpc_url="http://localhost:8545")
    assert cfg.rpc_url == "http://localhost:8545"
    assert (cfg.native_symbol, cfg.native_unit) == ("MON", "ether")
    assert (cfg.gas_price_symbol, cfg.gas_price_unit) == ("Gwei", "gwei")
