import logging
import sys
from typing import Optional

import typer

from zigzagbot.live import run_live
from zigzagbot.protocol.envelope import decode as decode_frame, encode as encode_op
from zigzagbot.protocol.errors import CodecError
from zigzagbot.protocol.messages import Login
from zigzagbot.protocol.registry import available


app = typer.Typer(help="ZigZag protocol CLI")
log = logging.getLogger("cli")


@app.command()
def login(
    chain_id: int = typer.Option(1000, help="1000=rinkeby, 1=mainnet"),
    user_id: str = typer.Option(..., help="zkSync account id"),
):
    """Print the login frame."""
    try:
        frame = encode_op(Login(chain_id=chain_id, user_id=user_id))
    except CodecError as e:
        typer.echo(f"encode failed [{e.kind}]: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(frame.decode("utf-8"))


@app.command()
def decode(
    frame: Optional[str] = typer.Argument(None, help="JSON 프레임 (생략 시 --file 또는 stdin)"),
    file: Optional[str] = typer.Option(None, help="프레임이 담긴 파일 경로"),
) -> None:
    """Decode one frame and print the operation."""
    if frame is None:
        if file:
            with open(file, "r", encoding="utf-8") as f:
                frame = f.read()
        else:
            frame = sys.stdin.read()
    try:
        op = decode_frame(frame.strip())
    except CodecError as e:
        typer.echo(f"decode failed [{e.kind}]: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(repr(op))


@app.command()
def ops():
    for tag in available():
        typer.echo(tag)


@app.command()
def listen(
    config: Optional[str] = typer.Option("configs/dev.yaml", help="YAML 설정 경로"),
    frames: int = typer.Option(0, help="수신 프레임 N개 후 종료 (0=무제한)"),
):
    n = run_live(config, max_frames=frames)
    log.info("listen finished after %d frames", n)
    typer.echo(f"received {n} frames")


if __name__ == "__main__":
    app()
