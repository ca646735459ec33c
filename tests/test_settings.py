from pathlib import Path

from zigzagbot.settings import Settings


def test_settings_defaults(monkeypatch):
    for k in ("ZIGZAG_USER_ID", "ZIGZAG_NETWORK", "ZIGZAG_WS_URL"):
        monkeypatch.delenv(k, raising=False)
    s = Settings.load()
    assert s.user_id is None
    assert s.network.endpoint() == ("wss://secret-thicket-93345.herokuapp.com", 1000)


def test_settings_yaml_and_env_overlay(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "dev.yaml"
    cfg.write_text(
        "env: test\nnetwork:\n  name: mainnet\nuser_id: '1'\nmarkets: [ETH-USDT, WBTC-USDT]\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("ZIGZAG_NETWORK", raising=False)
    monkeypatch.setenv("ZIGZAG_USER_ID", "27334")
    monkeypatch.setenv("ZIGZAG_WS_URL", "ws://localhost:3004")

    s = Settings.load(str(cfg))
    assert s.env == "test"
    assert s.user_id == "27334"
    assert s.markets == ["ETH-USDT", "WBTC-USDT"]
    # URL만 덮어쓰고 chain id는 네트워크 기본값 유지
    assert s.network.endpoint() == ("ws://localhost:3004", 1)
