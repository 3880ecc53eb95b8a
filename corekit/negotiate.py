"""Encoders and decoders that turn objects into serialized form and back."""

from __future__ import annotations

import abc
import base64
import json
from typing import Any

__all__ = [
    "Encoder",
    "Decoder",
    "NegotiateError",
    "JSONSerializer",
    "ClientNegotiator",
    "new_simple_client_negotiator",
]


class Encoder(abc.ABC):
    """Writes objects to a serialized form."""

    @abc.abstractmethod
    def encode(self, value: Any) -> bytes:
        """Serialize a value; raises when it cannot be serialized."""


class Decoder(abc.ABC):
    """Loads objects from serialized data."""

    @abc.abstractmethod
    def decode(self, data: bytes | str) -> Any:
        """Deserialize data; raises ValueError when it is malformed."""


class NegotiateError(Exception):
    """No serializer is registered for a requested content type."""

    def __init__(self, content_type: str, stream: bool = False) -> None:
        self.content_type = content_type
        self.stream = stream
        if stream:
            message = f"no stream serializers registered for {content_type}"
        else:
            message = f"no serializers registered for {content_type}"
        super().__init__(message)


def _json_default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"value of type {type(value).__name__} is not JSON serializable")


class JSONSerializer(Encoder, Decoder):
    """Encodes to and decodes from compact JSON."""

    def encode(self, value: Any) -> bytes:
        text = json.dumps(
            value,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
        return text.encode("utf-8")

    def decode(self, data: bytes | str) -> Any:
        return json.loads(data)


class ClientNegotiator:
    """Hands out the encoder and decoder used for client requests."""

    def encoder(self) -> Encoder:
        return JSONSerializer()

    def decoder(self) -> Decoder:
        return JSONSerializer()


def new_simple_client_negotiator() -> ClientNegotiator:
    """Return a negotiator that always uses the JSON serializer."""
    return ClientNegotiator()