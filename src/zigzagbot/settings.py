# src/zigzagbot/settings.py
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field
import os
import yaml


# 네트워크별 (ZigZag websocket, ZigZag chain id)
NETWORKS: dict[str, tuple[str, int]] = {
    "rinkeby": ("wss://secret-thicket-93345.herokuapp.com", 1000),
    "mainnet": ("wss://zigzag-exchange.herokuapp.com", 1),
}


class NetworkCfg(BaseModel):
    name: Literal["rinkeby", "mainnet"] = "rinkeby"
    ws_url: str | None = None
    chain_id: int | None = None

    def endpoint(self) -> tuple[str, int]:
        url, chain_id = NETWORKS[self.name]
        return (
            self.ws_url or url,
            self.chain_id if self.chain_id is not None else chain_id,
        )


class LogCfg(BaseModel):
    dir: str = "logs"
    filename: str = "zigzag.log"
    console_level: str = "INFO"
    file_level: str = "DEBUG"


class Settings(BaseSettings):
    env: str = "dev"
    network: NetworkCfg = NetworkCfg()
    user_id: str | None = None
    markets: list[str] = Field(default_factory=list)
    log: LogCfg = LogCfg()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, path: str | None = None):
        cfg: dict = {}
        if path:
            with open(path, "r", encoding="utf-8") as f:
                cfg = yaml.safe_load(f) or {}

        # 환경변수 오버레이 → YAML 값보다 우선
        uid = os.getenv("ZIGZAG_USER_ID")
        net = os.getenv("ZIGZAG_NETWORK")
        url = os.getenv("ZIGZAG_WS_URL")
        if uid:
            cfg["user_id"] = uid
        if net or url:
            cfg.setdefault("network", {})
            if net:
                cfg["network"]["name"] = net
            if url:
                cfg["network"]["ws_url"] = url

        return cls.model_validate(cfg)
