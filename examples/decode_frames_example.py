# examples/decode_frames_example.py
# ------------------------------------------------------------
# 간단 실행 예시: 서버에서 받은 프레임 몇 개를 디코드해서 출력
# (네트워크 연결 없이 FakeTransport로 재생)
# ------------------------------------------------------------
from zigzagbot.exchanges.fake import FakeTransport
from zigzagbot.exchanges.zigzag import ZigZagClient

FRAMES = [
    '{"op":"lastprice","args":[[["ETH-USDT",3370.93,-12.5],["WBTC-USDT","42000.1","10"]]]}',
    '{"op":"liquidity2","args":[1000,"ETH-USDT",[["b",3300,0.5],["s","3400",0.2,1642677967]]]}',
    '{"op":"error","args":["submitorder3","Order is expired"]}',
    '{"op":"orderstatus","args":[[]]}',
]


def main():
    t = FakeTransport(inbound=FRAMES)
    client = ZigZagClient(t, chain_id=1000, user_id="27334")
    client.login()

    print("=== sent ===")
    for f in t.sent:
        print(f.decode("utf-8"))

    print("\n=== received ===")
    for frame in t.frames():
        op = client.handle(frame)
        print(repr(op) if op is not None else f"(dropped) {frame}")


if __name__ == "__main__":
    main()
