# src/zigzagbot/exchanges/zigzag.py
from __future__ import annotations
from typing import Optional, Protocol
import logging

from zigzagbot.protocol.envelope import decode, encode
from zigzagbot.protocol.enums import Side
from zigzagbot.protocol.errors import CodecError
from zigzagbot.protocol.messages import (
    Cancelall,
    Dailyvolumereq,
    Error,
    Fillreceiptreq,
    Login,
    Marketreq,
    Operation,
    Orderreceiptreq,
    Refreshliquidity,
    Requestquote,
    Subscribemarket,
    Unsubscribemarket,
)

log = logging.getLogger("zigzag")


class Transport(Protocol):
    def send(self, frame: bytes) -> None: ...


class ZigZagClient:
    """ZigZag websocket 프로토콜 클라이언트 (전송 계층은 주입받음)"""

    name = "zigzag"

    def __init__(self, transport: Transport, chain_id: int, user_id: str):
        self.transport = transport
        self.chain_id = chain_id
        self.user_id = user_id

    # --- 송신 ---
    def send(self, op: Operation) -> bytes:
        frame = encode(op)
        log.debug("-> %s", frame.decode("utf-8"))
        self.transport.send(frame)
        return frame

    def login(self) -> Login:
        op = Login(chain_id=self.chain_id, user_id=self.user_id)
        self.send(op)
        log.info("login sent (chain_id=%s, user_id=%s)", self.chain_id, self.user_id)
        return op

    def subscribe(self, market: str) -> Subscribemarket:
        op = Subscribemarket(chain_id=self.chain_id, market=market)
        self.send(op)
        return op

    def unsubscribe(self, market: str) -> Unsubscribemarket:
        op = Unsubscribemarket(chain_id=self.chain_id, market=market)
        self.send(op)
        return op

    def refresh_liquidity(self, market: str) -> Refreshliquidity:
        op = Refreshliquidity(chain_id=self.chain_id, market=market)
        self.send(op)
        return op

    def cancel_all(self) -> Cancelall:
        op = Cancelall(chain_id=self.chain_id, user_id=self.user_id)
        self.send(op)
        return op

    def request_quote(
        self, market: str, side: Side, base_quantity: float, quote_quantity: float
    ) -> Requestquote:
        op = Requestquote(
            chain_id=self.chain_id,
            market=market,
            side=side,
            base_quantity=float(base_quantity),
            quote_quantity=float(quote_quantity),
        )
        self.send(op)
        return op

    def order_receipt(self, order_id: int) -> Orderreceiptreq:
        op = Orderreceiptreq(chain_id=self.chain_id, order_id=order_id)
        self.send(op)
        return op

    def fill_receipt(self, order_id: int) -> Fillreceiptreq:
        op = Fillreceiptreq(chain_id=self.chain_id, order_id=order_id)
        self.send(op)
        return op

    def market_info(self, detailed: bool = False) -> Marketreq:
        op = Marketreq(chain_id=self.chain_id, detailed=detailed)
        self.send(op)
        return op

    def daily_volume(self) -> Dailyvolumereq:
        op = Dailyvolumereq(chain_id=self.chain_id)
        self.send(op)
        return op

    # --- 수신 ---
    def handle(self, frame: bytes | str) -> Optional[Operation]:
        """
        수신 프레임 디코드.
          - 디코드 실패: WARNING 로그 후 None (연결 유지 여부는 호출자가 판단)
          - 서버 error 메시지: ERROR 로그 후 그대로 반환
        """
        try:
            op = decode(frame)
        except CodecError as e:
            log.warning("dropped frame (%s): %s", e.kind, e)
            return None
        if isinstance(op, Error):
            log.error("server error on '%s': %s", op.operation, op.error)
        else:
            log.debug("<- %s", op.op)
        return op
