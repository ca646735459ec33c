# src/zigzagbot/protocol/messages.py
# ------------------------------------------------------------
# ZigZag 메시지 카탈로그
# - @operation 클래스 = Operation 변형 (태그 = 클래스명 소문자)
# - @positional 클래스 = JSON 배열로 오가는 인자 레코드
# - 키-값 객체(marketinfo, zkSync 주문)는 pydantic 모델
# 참고: https://github.com/ZigZagExchange/backend/blob/master/README.md
# ------------------------------------------------------------
from __future__ import annotations
from typing import Annotated, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    StrictBool,
    StrictInt,
    StrictStr,
)
from pydantic.alias_generators import to_camel

from zigzagbot.protocol.enums import OrderStatus, Side
from zigzagbot.protocol.positional import (
    BOOL,
    F64,
    PRICE,
    REMAINING,
    STR,
    TX_HASH,
    U32,
    U64,
    Code,
    ListOf,
    Model,
    Record,
    col,
    positional,
)
from zigzagbot.protocol.registry import operation
from zigzagbot.protocol.scalars import Price, RemainingOrError, TxHash, decode_price, encode_price

ChainId = int
OrderId = int
FillId = int
UserId = str
Market = str
Amount = float
Timestamp = int
Date = str
Token = str

U32_MAX = 2**32 - 1


# --- 키-값 객체 (camelCase) ---
def _price_in(value):
    if isinstance(value, Price):
        return value
    return decode_price(value)


WirePrice = Annotated[Price, BeforeValidator(_price_in), PlainSerializer(encode_price)]
WireU32 = Annotated[StrictInt, Field(ge=0, le=U32_MAX)]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",  # minSize, maxSize, id 등 모르는 키는 무시
        arbitrary_types_allowed=True,
    )


class Asset(_WireModel):
    id: WireU32
    address: StrictStr
    symbol: StrictStr
    decimals: WireU32
    enabled_for_fees: StrictBool


class MarketInfo(_WireModel):
    base_asset_id: WireU32
    quote_asset_id: WireU32
    base_fee: WirePrice
    quote_fee: WirePrice
    zigzag_chain_id: WireU32
    price_precision_decimal: WireU32
    base_asset: Asset
    quote_asset: Asset
    alias: StrictStr


class ZkSignature(_WireModel):
    pub_key: StrictStr
    signature: StrictStr


class EthSignature(_WireModel):
    type: StrictStr
    signature: StrictStr


class ZkOrder(_WireModel):
    """zkSync limit order as signed by the wallet (amounts are radix-10 strings)."""

    account_id: WireU32
    recipient: StrictStr
    nonce: WireU32
    token_buy: WireU32
    token_sell: WireU32
    ratio: Tuple[StrictStr, StrictStr]
    amount: StrictStr
    valid_from: Annotated[StrictInt, Field(ge=0)]
    valid_until: Annotated[StrictInt, Field(ge=0)]
    signature: ZkSignature
    eth_signature: Optional[EthSignature] = None


# --- 중첩 레코드 ---
@positional
class Liquidity:
    side: Side = col(Code(Side))
    price: Price = col(PRICE)
    base_quantity: Amount = col(F64)
    expires: Optional[Timestamp] = col(U64, optional=True)


@positional
class Order:
    chain_id: ChainId = col(U32)
    id: OrderId = col(U32)
    market: Market = col(STR)
    side: Side = col(Code(Side))
    price: Price = col(PRICE)
    base_quantity: Amount = col(F64)
    quote_quantity: Amount = col(F64)
    expires: Timestamp = col(U64)
    user_id: UserId = col(STR)
    order_status: OrderStatus = col(Code(OrderStatus))
    remaining: Optional[RemainingOrError] = col(REMAINING, optional=True)
    tx_hash: Optional[TxHash] = col(TX_HASH, optional=True)


@positional
class Fill:
    chain_id: ChainId = col(U32)
    id: FillId = col(U32)
    market: Market = col(STR)
    side: Side = col(Code(Side))
    price: Price = col(PRICE)
    base_quantity: Amount = col(F64)
    fill_status: OrderStatus = col(Code(OrderStatus))
    # 브로드캐스트 전에는 null
    tx_hash: Optional[TxHash] = col(TX_HASH, nullable=True)
    taker_user_id: UserId = col(STR)
    maker_user_id: UserId = col(STR)
    fee_amount: Optional[Amount] = col(F64, optional=True)
    fee_token: Optional[Token] = col(STR, optional=True)
    timestamp: Optional[Date] = col(STR, optional=True)


@positional
class FillStatus:
    chain_id: ChainId = col(U32)
    fill_id: FillId = col(U32)
    status: OrderStatus = col(Code(OrderStatus))
    tx_hash: Optional[TxHash] = col(TX_HASH, nullable=True)
    remaining: Optional[RemainingOrError] = col(REMAINING, nullable=True)
    fee_amount: Optional[Amount] = col(F64, optional=True)
    fee_token: Optional[Token] = col(STR, optional=True)
    timestamp: Optional[Timestamp] = col(U64, optional=True)


@positional
class PriceUpdate:
    market: Market = col(STR)
    price: Price = col(PRICE)
    price_change: Price = col(PRICE)
    quote_volume: Optional[Amount] = col(F64, optional=True)
    base_volume: Optional[Amount] = col(F64, optional=True)


@positional
class Volume:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)
    date: Date = col(STR)
    base_volume: Amount = col(F64)
    quote_volume: Amount = col(F64)


# --- Operation 변형 ---
@operation
@positional
class Login:
    chain_id: ChainId = col(U32)
    user_id: UserId = col(STR)


@operation
@positional
class Submitorder3:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)
    zk_order: ZkOrder = col(Model(ZkOrder))


@operation
@positional
class Indicateliq2:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)
    liquidity: Tuple[Liquidity, ...] = col(ListOf(Record(Liquidity)))


@operation
@positional
class Fillrequest:
    chain_id: ChainId = col(U32)
    order_id: OrderId = col(U32)
    fill_order: ZkOrder = col(Model(ZkOrder))


@operation
@positional
class Userordermatch:
    chain_id: ChainId = col(U32)
    taker_order: ZkOrder = col(Model(ZkOrder))
    maker_order: ZkOrder = col(Model(ZkOrder))


@operation
@positional
class Orderreceiptreq:
    chain_id: ChainId = col(U32)
    order_id: OrderId = col(U32)


@operation
@positional
class Orderreceipt(Order):
    pass


@operation
@positional
class Fillreceiptreq:
    chain_id: ChainId = col(U32)
    order_id: OrderId = col(U32)


@operation
@positional
class Fillreceipt(Fill):
    pass


@operation
@positional
class Orders:
    orders: Tuple[Order, ...] = col(ListOf(Record(Order)))


@operation
@positional
class Fills:
    fills: Tuple[Fill, ...] = col(ListOf(Record(Fill)))


@operation
@positional
class Fillstatus:
    statuses: Tuple[FillStatus, ...] = col(ListOf(Record(FillStatus)))


@operation
@positional
class Liquidity2:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)
    liquidity: Tuple[Liquidity, ...] = col(ListOf(Record(Liquidity)))


@operation
@positional
class Refreshliquidity:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)


@operation
@positional
class Lastprice:
    updates: Tuple[PriceUpdate, ...] = col(ListOf(Record(PriceUpdate)))


@operation
@positional
class Marketsummary:
    market: Market = col(STR)
    price: Price = col(PRICE)
    high_24: Price = col(PRICE)
    low_24: Price = col(PRICE)
    price_change: Price = col(PRICE)
    base_volume: Amount = col(F64)
    quote_volume: Amount = col(F64)


@operation
@positional
class Subscribemarket:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)


@operation
@positional
class Unsubscribemarket:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)


@operation
@positional
class Userorderack(Order):
    pass


@operation
@positional
class Cancelall:
    chain_id: ChainId = col(U32)
    user_id: UserId = col(STR)


@operation
@positional
class Requestquote:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)
    side: Side = col(Code(Side))
    base_quantity: Amount = col(F64)
    quote_quantity: Amount = col(F64)


@operation
@positional
class Quote:
    chain_id: ChainId = col(U32)
    market: Market = col(STR)
    side: Side = col(Code(Side))
    base_quantity: Amount = col(F64)
    price: Price = col(PRICE)
    quote_quantity: Amount = col(F64)


@operation
@positional
class Marketinfo:
    market_info: MarketInfo = col(Model(MarketInfo))


@operation
@positional
class Marketinfo2:
    market_infos: Tuple[MarketInfo, ...] = col(ListOf(Model(MarketInfo)))


@operation
@positional
class Marketreq:
    chain_id: ChainId = col(U32)
    detailed: bool = col(BOOL)


@operation
@positional
class Dailyvolumereq:
    chain_id: ChainId = col(U32)


@operation
@positional
class Dailyvolume:
    volumes: Tuple[Volume, ...] = col(ListOf(Record(Volume)))


@operation
@positional
class Error:
    operation: str = col(STR)
    error: str = col(STR)


Operation = Union[
    Login,
    Submitorder3,
    Indicateliq2,
    Fillrequest,
    Userordermatch,
    Orderreceiptreq,
    Orderreceipt,
    Fillreceiptreq,
    Fillreceipt,
    Orders,
    Fills,
    Fillstatus,
    Liquidity2,
    Refreshliquidity,
    Lastprice,
    Marketsummary,
    Subscribemarket,
    Unsubscribemarket,
    Userorderack,
    Cancelall,
    Requestquote,
    Quote,
    Marketinfo,
    Marketinfo2,
    Marketreq,
    Dailyvolumereq,
    Dailyvolume,
    Error,
]
