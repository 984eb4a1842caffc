"""Tests for the message model and its JSON mapping."""

import io
import json

import pytest

from hookshot.core.errors import EncodingError, ErrorKind
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


ICON = "https://cdn.example.com/icon.gif"


def make_embed() -> Embed:
    """Create a fully populated embed."""
    return Embed(
        author=Author(name="The author", url=ICON, icon_url=ICON),
        footer=Footer(text="This is the footer", icon_url=ICON),
        title="This is the title",
        description="This is the body of the embed",
        thumbnail=Image(url=ICON),
        image=Image(url=ICON),
        url=ICON,
        fields=[
            Field(name="1", value="nana", inline=True),
            Field(name="3", value="nanabongo"),
        ],
        color=0xB00B69,
    )


class TestMessageDefaults:
    """Tests for default values of the model."""

    def test_empty_message_has_empty_fields(self):
        """All fields of a new Message are empty."""
        message = Message()

        assert message.username == ""
        assert message.avatar_url == ""
        assert message.content == ""
        assert message.embeds == []
        assert message.attachments == []

    def test_default_lists_are_not_shared(self):
        """Each instance gets its own embeds list."""
        first = Message()
        second = Message()
        first.embeds.append(Embed())

        assert second.embeds == []

    def test_field_is_not_inline_by_default(self):
        """Field.inline defaults to False."""
        assert Field(name="a", value="b").inline is False


class TestMessageToPayload:
    """Tests for message_to_payload function."""

    def test_empty_message(self):
        """Empty message maps to empty values under the wire keys."""
        assert message_to_payload(Message()) == {
            "username": "",
            "avatar_url": "",
            "content": "",
            "embeds": [],
        }

    def test_top_level_keys(self):
        """Top-level attributes map to the wire key names."""
        message = Message(username="Captain'Hook", avatar_url=ICON, content="hello")

        payload = message_to_payload(message)

        assert payload["username"] == "Captain'Hook"
        assert payload["avatar_url"] == ICON
        assert payload["content"] == "hello"

    def test_attachments_are_excluded(self):
        """Attachments never appear in the payload."""
        message = Message(
            content="with file",
            attachments=[Attachment(content=io.BytesIO(b"data"), filename="a.txt")],
        )

        payload = message_to_payload(message)

        assert set(payload) == {"username", "avatar_url", "content", "embeds"}

    def test_embed_mapping(self):
        """Embed fields map to nested wire objects."""
        payload = message_to_payload(Message(embeds=[make_embed()]))
        embed = payload["embeds"][0]

        assert embed["author"] == {"name": "The author", "url": ICON, "icon_url": ICON}
        assert embed["footer"] == {"text": "This is the footer", "icon_url": ICON}
        assert embed["title"] == "This is the title"
        assert embed["description"] == "This is the body of the embed"
        assert embed["thumbnail"] == {"url": ICON}
        assert embed["image"] == {"url": ICON}
        assert embed["url"] == ICON
        assert embed["color"] == 0xB00B69

    def test_empty_embed_keeps_all_keys(self):
        """An empty embed still carries every key with empty values."""
        embed = message_to_payload(Message(embeds=[Embed()]))["embeds"][0]

        assert embed == {
            "author": {"name": "", "url": "", "icon_url": ""},
            "footer": {"text": "", "icon_url": ""},
            "title": "",
            "description": "",
            "thumbnail": {"url": ""},
            "image": {"url": ""},
            "url": "",
            "fields": [],
            "color": 0,
        }

    def test_inline_true_is_emitted(self):
        """A field with inline=True serializes with inline: true."""
        payload = message_to_payload(Message(embeds=[make_embed()]))

        assert payload["embeds"][0]["fields"][0] == {
            "name": "1",
            "value": "nana",
            "inline": True,
        }

    def test_inline_false_is_omitted(self):
        """A field with inline=False has no inline key."""
        payload = message_to_payload(Message(embeds=[make_embed()]))

        assert payload["embeds"][0]["fields"][1] == {"name": "3", "value": "nanabongo"}

    def test_embed_order_is_preserved(self):
        """Embeds keep their order."""
        message = Message(embeds=[Embed(title="a"), Embed(title="b"), Embed(title="c")])

        titles = [e["title"] for e in message_to_payload(message)["embeds"]]

        assert titles == ["a", "b", "c"]


class TestEncodeMessage:
    """Tests for encode_message function."""

    def test_returns_json_document(self):
        """Encoded text parses back to the payload."""
        message = Message(content="héllo", embeds=[make_embed()])

        assert json.loads(encode_message(message)) == message_to_payload(message)

    def test_unserializable_value_raises_encoding_error(self):
        """A value JSON cannot represent raises EncodingError."""
        message = Message(content=object())

        with pytest.raises(EncodingError) as exc_info:
            encode_message(message)

        assert exc_info.value.kind is ErrorKind.ENCODING
        assert isinstance(exc_info.value.cause, TypeError)

    @pytest.mark.parametrize("color", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_number_raises_encoding_error(self, color):
        """NaN and infinities have no JSON form and raise EncodingError."""
        message = Message(embeds=[Embed(color=color)])

        with pytest.raises(EncodingError) as exc_info:
            encode_message(message)

        assert isinstance(exc_info.value.cause, ValueError)


class TestRgbColor:
    """Tests for rgb_color function."""

    def test_packs_components(self):
        """Components are packed as 0xRRGGBB."""
        assert rgb_color(0xB0, 0x0B, 0x69) == 0xB00B69

    def test_black_and_white(self):
        """Extremes pack correctly."""
        assert rgb_color(0, 0, 0) == 0
        assert rgb_color(255, 255, 255) == 0xFFFFFF

    def test_out_of_range_raises(self):
        """Components outside 0..255 raise ValueError."""
        with pytest.raises(ValueError):
            rgb_color(256, 0, 0)
        with pytest.raises(ValueError):
            rgb_color(0, -1, 0)
