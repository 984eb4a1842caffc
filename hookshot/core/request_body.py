"""Request body selection - Pure functions.

A message goes out either as a plain JSON body or, when it carries
attachments, as multipart/form-data with the JSON in a `payload_json`
form field. The choice is made once per send, here.
"""

from dataclasses import dataclass, field
from typing import Any, BinaryIO

from hookshot.core.message import Message, encode_message


JSON_CONTENT_TYPE = "application/json"

# Form field holding the JSON document in multipart requests
PAYLOAD_FIELD = "payload_json"


@dataclass(frozen=True)
class JsonBody:
    """Body for a message without attachments.

    Attributes:
        data: UTF-8 encoded JSON document
    """
    data: bytes

    @property
    def content_type(self) -> str:
        return JSON_CONTENT_TYPE


@dataclass(frozen=True)
class MultipartBody:
    """Body for a message with attachments.

    The Content-Type (with its boundary) is produced by the multipart
    encoder when the request is prepared, so it is None here.

    Attributes:
        payload_json: JSON document sent as a plain form field
        files: (part name, (filename, stream)) pairs in attachment order
    """
    payload_json: str
    files: list[tuple[str, tuple[str, BinaryIO]]] = field(default_factory=list)

    @property
    def content_type(self) -> None:
        return None


RequestBody = JsonBody | MultipartBody


def file_part_name(index: int) -> str:
    """Name of the multipart part for the attachment at `index`."""
    return f"file{index}"


def build_request_body(message: Message) -> RequestBody:
    """Build the request body for a message.

    Pure function (attachment streams are referenced, not read).

    Args:
        message: Message to send

    Returns:
        JsonBody when there are no attachments, MultipartBody otherwise

    Raises:
        EncodingError: If the message cannot be encoded as JSON
    """
    # The JSON document is needed on both branches
    payload = encode_message(message)

    if not message.attachments:
        return JsonBody(data=payload.encode("utf-8"))

    files = [
        (file_part_name(i), (attachment.filename, attachment.content))
        for i, attachment in enumerate(message.attachments)
    ]
    return MultipartBody(payload_json=payload, files=files)


def as_request_kwargs(body: RequestBody) -> dict[str, Any]:
    """Translate a request body into keyword arguments for requests.Request.

    Pure function.

    Args:
        body: Body from build_request_body()

    Returns:
        Keyword arguments (data/headers or data/files)
    """
    if isinstance(body, JsonBody):
        return {
            "data": body.data,
            "headers": {"Content-Type": body.content_type},
        }
    return {
        "data": {PAYLOAD_FIELD: body.payload_json},
        "files": list(body.files),
    }
