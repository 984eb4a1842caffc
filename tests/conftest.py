"""Shared test helpers."""

import re

import pytest


def _split_multipart(content_type: str, body: bytes) -> list[dict]:
    boundary = content_type.split("boundary=", 1)[1].encode()
    parts = []
    # First chunk is the preamble, last one the closing "--"
    for chunk in body.split(b"--" + boundary)[1:-1]:
        head, _, data = chunk.partition(b"\r\n\r\n")
        name = re.search(rb'; name="([^"]*)"', head)
        filename = re.search(rb'; filename="([^"]*)"', head)
        parts.append({
            "name": name.group(1).decode() if name else None,
            "filename": filename.group(1).decode() if filename else None,
            "headers": head.decode("latin-1"),
            "data": data[:-2],
        })
    return parts


@pytest.fixture
def parse_multipart():
    """Split a multipart/form-data body into its parts.

    Returns a function taking (content_type, body) and returning a list of
    dicts with name, filename, headers and data for each part, in order.
    """
    return _split_multipart
