"""hookshot - post chat messages to a webhook.

Usage:
    dispatcher = hookshot.create(url)
    dispatcher.set_message(hookshot.Message(content="Hello"))
    result = dispatcher.send()
"""

from hookshot.core import (
    Attachment,
    Author,
    DispatchError,
    Embed,
    EncodingError,
    ErrorKind,
    Field,
    Footer,
    Image,
    Message,
    RemoteRejectionError,
    RequestBuildError,
    TransportError,
)
from hookshot.shell import Dispatcher, DispatchResult, create

__all__ = [
    # Model
    "Message",
    "Embed",
    "Author",
    "Footer",
    "Image",
    "Field",
    "Attachment",
    # Errors
    "DispatchError",
    "ErrorKind",
    "EncodingError",
    "RequestBuildError",
    "TransportError",
    "RemoteRejectionError",
    # Dispatcher
    "Dispatcher",
    "DispatchResult",
    "create",
]
