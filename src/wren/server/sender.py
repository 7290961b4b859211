"""Writes a wren Response to ASGI ``send()``."""

from wren._internal.types import Send
from wren.http.response import Response

# Statuses that never carry a message body (besides 1xx)
_BODYLESS = frozenset({204, 304})


def encode_headers(response: Response, content_length: int) -> list[tuple[bytes, bytes]]:
    """Response headers as lowercased latin-1 byte pairs."""
    pairs = [
        ("content-type", response.content_type),
        *response.headers,
        ("content-length", str(content_length)),
    ]
    return [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in pairs]


async def send_response(response: Response, send: Send) -> None:
    bodyless = response.status < 200 or response.status in _BODYLESS
    body = b"" if bodyless else response.body_bytes
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": encode_headers(response, len(body)),
        }
    )
    await send({"type": "http.response.body", "body": body})
