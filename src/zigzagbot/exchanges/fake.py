from typing import Iterable, Iterator, List

from zigzagbot.protocol.envelope import decode
from zigzagbot.protocol.messages import Operation


class FakeTransport:
    name = "fake"

    def __init__(self, inbound: Iterable[bytes | str] = ()):
        self.sent: List[bytes] = []
        self.inbound = list(inbound)

    def send(self, frame: bytes) -> None:
        self.sent.append(frame)

    def decoded(self) -> List[Operation]:
        return [decode(f) for f in self.sent]

    def frames(self) -> Iterator[bytes | str]:
        while self.inbound:
            yield self.inbound.pop(0)
