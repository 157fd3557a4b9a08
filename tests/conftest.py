"""
Shared fixtures: builders for IPTC records, Photoshop resources and APP13 segments.
"""

import struct

import pytest


def _record(tag, value):
    if isinstance(value, str):
        value = value.encode("utf-8")
    return b"\x1c\x02" + bytes([tag]) + struct.pack(">H", len(value)) + value


def _resource(payload=b"", name_length=0, resource_id=0x0404):
    """
    8BIM header as the detector reads it: the name length byte sits at +7 and
    the payload starts after the padded name (4 bytes for a legacy empty name).
    """
    padded = name_length + 1 if name_length % 2 else name_length
    if padded == 0:
        padded = 4
    return (
        b"8BIM"
        + struct.pack(">H", resource_id)
        + b"\x00"
        + bytes([name_length])
        + b"\x00" * padded
        + payload
    )


def _app13(resources):
    body = b"Photoshop 3.0\x00" + resources
    return b"\xff\xed" + struct.pack(">H", len(body) + 2) + body


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def make_resource():
    return _resource


@pytest.fixture
def make_app13():
    return _app13
