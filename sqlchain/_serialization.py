"""JSON encoding used by the structured log formatter."""

from typing import Any, Literal, Union, overload

import msgspec

__all__ = ("encode_json",)


def _default_enc_hook(value: Any) -> Any:
    return str(value)


_encoder = msgspec.json.Encoder(enc_hook=_default_enc_hook)


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode data to JSON.

    Values msgspec cannot encode natively are rendered with :func:`str`.

    Args:
        data: Data to encode.
        as_bytes: Whether to return bytes instead of string.

    Returns:
        JSON string or bytes.
    """
    encoded = _encoder.encode(data)
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")
