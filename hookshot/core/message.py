"""Webhook message model - Pure data structures.

These dataclasses describe a chat message: plain text, rich embeds and
file attachments. Every field has an empty default, so an empty Message
is a valid thing to send. Attachments never appear in the JSON payload;
they travel as multipart file parts.
"""

import json
from dataclasses import dataclass, field
from typing import Any, BinaryIO

from hookshot.core.errors import EncodingError


@dataclass
class Author:
    """Author block shown at the top of an embed.

    Attributes:
        name: Display name
        url: Link on the name
        icon_url: Small icon next to the name
    """
    name: str = ""
    url: str = ""
    icon_url: str = ""


@dataclass
class Footer:
    """Footer block of an embed."""
    text: str = ""
    icon_url: str = ""


@dataclass
class Image:
    """An image (or thumbnail) inside an embed."""
    url: str = ""


@dataclass
class Field:
    """A name/value field inside an embed.

    Attributes:
        name: Field title
        value: Field text
        inline: Render side by side with neighbouring fields.
                Only emitted on the wire when True.
    """
    name: str = ""
    value: str = ""
    inline: bool = False


@dataclass
class Embed:
    """A rich content block.

    Attributes:
        author: Author block
        footer: Footer block
        title: Embed title
        description: Embed body text
        thumbnail: Small image on the side
        image: Large image
        url: Link on the title
        fields: Ordered name/value fields
        color: Packed 0xRRGGBB side bar color
    """
    author: Author = field(default_factory=Author)
    footer: Footer = field(default_factory=Footer)
    title: str = ""
    description: str = ""
    thumbnail: Image = field(default_factory=Image)
    image: Image = field(default_factory=Image)
    url: str = ""
    fields: list[Field] = field(default_factory=list)
    color: int = 0


@dataclass
class Attachment:
    """A file uploaded alongside the message.

    The stream is read once while the request is built. Closing it is
    the caller's job.

    Attributes:
        content: Readable binary stream
        filename: Name the file is uploaded under
    """
    content: BinaryIO
    filename: str


@dataclass
class Message:
    """A webhook message.

    Attributes:
        username: Overrides the webhook's default display name
        avatar_url: Overrides the webhook's default avatar
        content: Plain text content
        embeds: Rich embed blocks
        attachments: Files sent as multipart parts (not part of the JSON)
    """
    username: str = ""
    avatar_url: str = ""
    content: str = ""
    embeds: list[Embed] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)


def rgb_color(red: int, green: int, blue: int) -> int:
    """Pack RGB components into an embed color.

    Pure function.

    Raises:
        ValueError: If a component is outside 0..255
    """
    for component in (red, green, blue):
        if not 0 <= component <= 255:
            raise ValueError(f"Color component out of range: {component}")
    return (red << 16) | (green << 8) | blue


def _field_to_dict(f: Field) -> dict[str, Any]:
    data: dict[str, Any] = {"name": f.name, "value": f.value}
    if f.inline:
        data["inline"] = True
    return data


def _embed_to_dict(embed: Embed) -> dict[str, Any]:
    return {
        "author": {
            "name": embed.author.name,
            "url": embed.author.url,
            "icon_url": embed.author.icon_url,
        },
        "footer": {
            "text": embed.footer.text,
            "icon_url": embed.footer.icon_url,
        },
        "title": embed.title,
        "description": embed.description,
        "thumbnail": {"url": embed.thumbnail.url},
        "image": {"url": embed.image.url},
        "url": embed.url,
        "fields": [_field_to_dict(f) for f in embed.fields],
        "color": embed.color,
    }


def message_to_payload(message: Message) -> dict[str, Any]:
    """Map a message to its JSON payload.

    Pure function. Attachments are left out.

    Args:
        message: Message to map

    Returns:
        Payload dict using the remote API's key names
    """
    return {
        "username": message.username,
        "avatar_url": message.avatar_url,
        "content": message.content,
        "embeds": [_embed_to_dict(e) for e in message.embeds],
    }


def encode_message(message: Message) -> str:
    """Encode a message as a JSON document.

    Args:
        message: Message to encode

    Returns:
        JSON text of the payload

    Raises:
        EncodingError: If a field holds a value JSON cannot represent
    """
    try:
        return json.dumps(message_to_payload(message), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodingError("error encoding the webhook", cause=e) from e
