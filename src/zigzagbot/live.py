# src/zigzagbot/live.py
from __future__ import annotations
import asyncio
import logging
from collections import deque

import websockets

from zigzagbot.settings import Settings
from zigzagbot.exchanges.zigzag import ZigZagClient
from zigzagbot.logging_config import setup as setup_logging
from zigzagbot.protocol.messages import Operation

log = logging.getLogger("live")


class OutboxTransport:
    """ZigZagClient.send()는 동기 → 프레임을 모아두고 소켓에 비동기로 흘려보낸다."""

    def __init__(self):
        self.pending: deque[bytes] = deque()

    def send(self, frame: bytes) -> None:
        self.pending.append(frame)

    async def flush(self, ws) -> int:
        n = 0
        while self.pending:
            # 텍스트 프레임으로 전송
            await ws.send(self.pending.popleft().decode("utf-8"))
            n += 1
        return n


def summarize(op: Operation) -> str:
    fields = getattr(type(op), "_wire_fields", ())
    parts = []
    for f in fields[:3]:
        v = getattr(op, f.name)
        if isinstance(v, tuple):
            v = f"<{len(v)} items>"
        parts.append(f"{f.name}={v}")
    return f"{op.op} " + " ".join(parts)


async def listen(s: Settings, max_frames: int = 0) -> int:
    if not s.user_id:
        raise ValueError("user_id is required (config 'user_id' or ZIGZAG_USER_ID)")

    url, chain_id = s.network.endpoint()
    outbox = OutboxTransport()
    client = ZigZagClient(outbox, chain_id=chain_id, user_id=s.user_id)

    received = 0
    async with websockets.connect(url) as ws:
        log.info("Connected to zigzag (%s, chain_id=%s)", url, chain_id)
        client.login()
        for m in s.markets:
            client.subscribe(m)
        await outbox.flush(ws)

        async for message in ws:
            received += 1
            op = client.handle(message)
            if op is not None:
                log.info("[%d] %s", received, summarize(op))
            await outbox.flush(ws)
            if max_frames and received >= max_frames:
                break
    log.info("listener stopped after %d frames", received)
    return received


def run_live(config_path: str | None, max_frames: int = 0) -> int:
    s = Settings.load(config_path)
    setup_logging(
        log_dir=s.log.dir,
        console_level=s.log.console_level,
        file_level=s.log.file_level,
        filename=s.log.filename,
    )
    log.info("env=%s network=%s", s.env, s.network.name)
    return asyncio.run(listen(s, max_frames=max_frames))
