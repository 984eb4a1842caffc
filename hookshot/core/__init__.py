"""Functional Core - Pure functions with no side effects.

This module contains the message model and request building:
- Message, embed and attachment data structures
- JSON field mapping
- JSON vs. multipart body selection
- Error types
- Configuration models

All functions here are deterministic and have no I/O.
"""

from hookshot.core.message import (
    Attachment,
    Author,
    Embed,
    Field,
    Footer,
    Image,
    Message,
    encode_message,
    message_to_payload,
    rgb_color,
)
from hookshot.core.errors import (
    DispatchError,
    EncodingError,
    ErrorKind,
    RemoteRejectionError,
    RequestBuildError,
    TransportError,
)
from hookshot.core.request_body import JsonBody, MultipartBody, build_request_body
from hookshot.core.config import DispatcherConfig, validate_config

__all__ = [
    # Message
    "Message",
    "Embed",
    "Author",
    "Footer",
    "Image",
    "Field",
    "Attachment",
    "message_to_payload",
    "encode_message",
    "rgb_color",
    # Errors
    "DispatchError",
    "ErrorKind",
    "EncodingError",
    "RequestBuildError",
    "TransportError",
    "RemoteRejectionError",
    # Request body
    "JsonBody",
    "MultipartBody",
    "build_request_body",
    # Config
    "DispatcherConfig",
    "validate_config",
]
