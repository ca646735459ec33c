from zigzagbot.exchanges.fake import FakeTransport
from zigzagbot.exchanges.zigzag import ZigZagClient
from zigzagbot.protocol.enums import Side
from zigzagbot.protocol.messages import (
    Cancelall,
    Error,
    Login,
    Marketreq,
    Requestquote,
    Subscribemarket,
    Userorderack,
)


def test_login_frame_sent():
    t = FakeTransport()
    c = ZigZagClient(t, chain_id=1000, user_id="27334")
    op = c.login()
    assert op == Login(chain_id=1000, user_id="27334")
    assert t.sent == [b'{"op":"login","args":[1000,"27334"]}']


def test_request_helpers_use_client_identity():
    t = FakeTransport()
    c = ZigZagClient(t, chain_id=1, user_id="42")
    c.subscribe("ETH-USDT")
    c.cancel_all()
    c.request_quote("ETH-USDT", Side.BUY, 1, 0)
    c.market_info(detailed=True)
    assert t.decoded() == [
        Subscribemarket(chain_id=1, market="ETH-USDT"),
        Cancelall(chain_id=1, user_id="42"),
        Requestquote(
            chain_id=1, market="ETH-USDT", side=Side.BUY, base_quantity=1.0, quote_quantity=0.0
        ),
        Marketreq(chain_id=1, detailed=True),
    ]


def test_handle_drops_bad_frames(caplog):
    c = ZigZagClient(FakeTransport(), chain_id=1000, user_id="1")
    caplog.set_level("WARNING")
    assert c.handle('{"op":"bogus","args":[]}') is None
    assert c.handle("garbage") is None
    assert any("dropped frame" in r.message for r in caplog.records)
    assert any("unknown_operation_tag" in r.message for r in caplog.records)


def test_handle_server_error(caplog):
    c = ZigZagClient(FakeTransport(), chain_id=1000, user_id="1")
    caplog.set_level("ERROR")
    op = c.handle('{"op":"error","args":["submitorder3","Order is expired"]}')
    assert op == Error(operation="submitorder3", error="Order is expired")
    assert any("Order is expired" in r.message for r in caplog.records)


def test_replay_inbound_frames():
    ack = (
        '{"op":"userorderack","args":[1000,5,"ETH-USDT","b","3300",0.1,330,'
        '1642677967,"1","o"]}'
    )
    t = FakeTransport(inbound=[ack, '{"op":"nope","args":[]}'])
    c = ZigZagClient(t, chain_id=1000, user_id="1")
    got = [c.handle(f) for f in t.frames()]
    assert isinstance(got[0], Userorderack)
    assert got[0].price.float_value == 3300.0
    assert got[1] is None
    assert t.inbound == []


def test_handle_survives_json_limits(caplog):
    c = ZigZagClient(FakeTransport(), chain_id=1000, user_id="1")
    caplog.set_level("WARNING")
    assert c.handle('{"op":"login","args":[' + "1" * 5000 + ',"x"]}') is None
    assert c.handle("[" * 100000) is None
    assert c.handle('{"op":"marketsummary","args":["m",' + "9" * 400 + ",1,1,1,1,1]}") is None
    kinds = [r.message for r in caplog.records if "dropped frame" in r.message]
    assert len(kinds) == 3
    assert sum("malformed_frame" in k for k in kinds) == 2
