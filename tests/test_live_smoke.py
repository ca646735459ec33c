import asyncio

import pytest

from zigzagbot.live import OutboxTransport, listen, summarize
from zigzagbot.exchanges.zigzag import ZigZagClient
from zigzagbot.protocol.messages import Orders, Subscribemarket
from zigzagbot.settings import Settings


class _FakeSocket:
    def __init__(self):
        self.sent = []

    async def send(self, message):
        self.sent.append(message)


def test_outbox_flushes_text_frames():
    outbox = OutboxTransport()
    c = ZigZagClient(outbox, chain_id=1000, user_id="27334")
    c.login()
    c.subscribe("ETH-USDT")

    ws = _FakeSocket()
    n = asyncio.run(outbox.flush(ws))
    assert n == 2
    assert ws.sent[0] == '{"op":"login","args":[1000,"27334"]}'
    assert not outbox.pending


def test_summarize():
    assert summarize(Subscribemarket(chain_id=1, market="ETH-USDT")) == (
        "subscribemarket chain_id=1 market=ETH-USDT"
    )
    assert summarize(Orders(orders=())) == "orders orders=<0 items>"


def test_listen_requires_user_id():
    s = Settings.model_validate({})
    with pytest.raises(ValueError):
        asyncio.run(listen(s, max_frames=1))
