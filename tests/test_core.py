"""
Unit tests for the reader entry points, options and helpers.
"""

import pytest


class TestReadApp13:
    """Tests for reading IPTC out of a JPEG APP13 segment."""

    def test_reads_caption(self, make_app13, make_resource, make_record):
        """Test the full probe, detect, slice and parse flow."""
        from iptc_reader import read_app13

        segment = make_app13(make_resource(make_record(0x78, "Hello")))
        jpeg = b"\xff\xd8" + segment + b"\xff\xd9"

        assert read_app13(jpeg, 2) == {"Caption": "Hello"}

    def test_payload_limited_to_segment(self, make_app13, make_resource, make_record):
        """Test records after the end of the segment are not read."""
        from iptc_reader import read_app13

        segment = make_app13(make_resource(make_record(0x19, "in")))
        jpeg = b"\xff\xd8" + segment + make_record(0x19, "out")

        assert read_app13(jpeg, 2) == {"Keywords": "in"}

    def test_not_photoshop(self):
        """Test a non-APP13 segment is not applicable."""
        from iptc_reader import read_app13

        exif = b"\xff\xe1\x00\x10Exif\x00\x00" + b"\x00" * 8

        assert read_app13(exif, 0) is None

    def test_no_iptc_resource(self, make_app13, make_resource):
        """Test a Photoshop segment without resource 0x0404."""
        from iptc_reader import read_app13

        segment = make_app13(make_resource(b"\x00" * 8, resource_id=0x040C))

        assert read_app13(segment, 0) is None

    def test_no_records(self, make_app13, make_resource):
        """Test an IPTC resource with no records gives None."""
        from iptc_reader import read_app13

        assert read_app13(make_app13(make_resource(b"\x00" * 4)), 0) is None

    def test_errors_collected(self, make_app13, make_resource, make_record):
        """Test truncated records surface on the reader, not as exceptions."""
        from iptc_reader import IptcReader, TruncatedRecordError

        payload = make_record(0x50, "Ann") + b"\x1c\x02\x78\x01\x00" + b"short"
        reader = IptcReader()

        assert reader.read_segment(make_app13(make_resource(payload)), 0) == {
            "Byline": "Ann"
        }
        assert len(reader.errors) == 1
        assert isinstance(reader.errors[0], TruncatedRecordError)


class TestReadPhotoshopResources:
    """Tests for reading a bare image resources block (TIFF tag 34377)."""

    def test_reads_after_other_resources(self, make_resource, make_record):
        """Test the IPTC resource is found after other resources."""
        from iptc_reader import read_photoshop_resources

        block = make_resource(b"\x00" * 10, resource_id=0x040C) + make_resource(
            make_record(0x19, "a") + make_record(0x19, "b"), name_length=3
        )

        assert read_photoshop_resources(block) == {"Keywords": ["a", "b"]}

    def test_no_iptc(self, make_resource):
        """Test a block without IPTC gives None."""
        from iptc_reader import read_photoshop_resources

        assert read_photoshop_resources(make_resource(resource_id=0x0422)) is None
        assert read_photoshop_resources(b"") is None

    def test_options_passed_through(self, make_resource, make_record):
        """Test options reach the parser."""
        from iptc_reader import read_photoshop_resources

        block = make_resource(make_record(0x78, "x"))

        assert read_photoshop_resources(block, {"translateKeys": False}) == {0x78: "x"}


class TestParse:
    """Tests for the module-level parse function."""

    def test_parse_bytes(self, make_record):
        """Test parse accepts raw bytes."""
        from iptc_reader import parse

        assert parse(make_record(0x69, "Headline")) == {"Headline": "Headline"}

    def test_parse_buffer_view(self, make_record):
        """Test parse accepts a BufferView sub-range."""
        from iptc_reader import parse
        from iptc_reader.util.buffer_view import BufferView

        data = make_record(0x5A, "Prague") + make_record(0x65, "Czechia")
        view = BufferView(data).subarray(0, len(data) - 2)

        assert parse(view) == {"City": "Prague"}

    def test_parse_empty(self):
        """Test parse of a buffer without records."""
        from iptc_reader import parse

        assert parse(b"\x00" * 16) == {}


class TestOptions:
    """Tests for Options."""

    def test_defaults(self):
        """Test default values."""
        from iptc_reader import Options

        for value in (None, True, {}):
            options = Options(value)
            assert options.translateKeys is True
            assert options.dictionary is None
            assert options["translateKeys"] is True

    def test_copy(self):
        """Test building Options from Options."""
        from iptc_reader import Options

        original = Options({"translateKeys": False})

        assert Options(original).translateKeys is False

    @pytest.mark.parametrize(
        "value",
        [
            {"silentErrors": True},
            {"translateKeys": "yes"},
            {"dictionary": ["Caption"]},
            "iptc",
            1,
        ],
    )
    def test_invalid(self, value):
        """Test invalid options are rejected."""
        from iptc_reader import InvalidOptionsError, IptcReaderError, Options

        with pytest.raises(InvalidOptionsError):
            Options(value)
        with pytest.raises(IptcReaderError):
            Options(value)


class TestTagNameResolver:
    """Tests for TagNameResolver."""

    def test_known_and_unknown(self):
        """Test names are resolved and unknown ids pass through."""
        from iptc_reader import TagNameResolver

        resolver = TagNameResolver()

        assert resolver.resolve(0x78) == "Caption"
        assert resolver.resolve(0x19) == "Keywords"
        assert resolver.resolve(0x00) == "ApplicationRecordVersion"
        assert resolver.resolve(0x02) == 0x02
        assert 0x78 in resolver
        assert 0x02 not in resolver

    def test_injected_dictionary_is_frozen(self):
        """Test an injected table is copied and read-only."""
        from iptc_reader import TagNameResolver

        table = {0x78: "Description"}
        resolver = TagNameResolver(table)
        table[0x78] = "Changed"

        assert resolver.resolve(0x78) == "Description"
        with pytest.raises(TypeError):
            resolver.dictionary[0x19] = "Keywords"

    def test_builtin_dictionary_is_read_only(self):
        """Test the built-in table cannot be modified."""
        from iptc_reader.dicts import IPTC_KEYS

        with pytest.raises(TypeError):
            IPTC_KEYS[0x78] = "Changed"


class TestAccumulate:
    """Tests for folding repeated values."""

    def test_scalar_then_list(self):
        """Test the scalar to list transition and appends."""
        from iptc_reader.util.helpers import accumulate

        mapping = {}
        accumulate(mapping, "Keywords", "a")
        assert mapping == {"Keywords": "a"}

        accumulate(mapping, "Keywords", "b")
        assert mapping == {"Keywords": ["a", "b"]}

        result = accumulate(mapping, "Keywords", "c")
        assert result is mapping
        assert mapping == {"Keywords": ["a", "b", "c"]}

    def test_keys_are_independent(self):
        """Test different keys do not affect each other."""
        from iptc_reader.util.helpers import accumulate

        mapping = {}
        accumulate(mapping, 25, "a")
        accumulate(mapping, "Caption", "b")
        accumulate(mapping, 25, "c")

        assert mapping == {25: ["a", "c"], "Caption": "b"}

    def test_pluralize_value(self):
        """Test the single-value step."""
        from iptc_reader.util.helpers import pluralize_value

        assert pluralize_value(None, "a") == "a"
        assert pluralize_value("a", "b") == ["a", "b"]
        assert pluralize_value(["a", "b"], "c") == ["a", "b", "c"]


class TestSegmentRegistry:
    """Tests for the segment parser registry."""

    def test_iptc_registered(self, make_app13, make_resource):
        """Test the dispatcher finds the IPTC parser."""
        from iptc_reader import Iptc
        from iptc_reader.plugins import get_segment_type, segment_parsers
        from iptc_reader.util.buffer_view import BufferView

        file = BufferView(make_app13(make_resource()))

        assert segment_parsers["iptc"] is Iptc
        assert get_segment_type(file, 0) == "iptc"
        assert get_segment_type(BufferView(b"\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 9), 0) is None

    def test_missing_parser(self):
        """Test asking for an unregistered parser fails."""
        from iptc_reader import IptcReaderError
        from iptc_reader.plugins import segment_parsers

        assert segment_parsers.get("xmp") is None
        with pytest.raises(IptcReaderError):
            segment_parsers["xmp"]

    def test_find_position(self, make_app13, make_resource, make_record):
        """Test the payload slice computed for an APP13 segment."""
        from iptc_reader import Iptc
        from iptc_reader.util.buffer_view import BufferView

        record = make_record(0x78, "Hello")
        segment = make_app13(make_resource(record))
        position = Iptc.find_position(BufferView(b"\xff\xd8" + segment), 2)

        # FF ED + length + 'Photoshop 3.0\0' before the resource
        header = 4 + 14 + 12
        assert position == {
            "offset": 2,
            "length": len(segment),
            "headerLength": header,
            "start": 2 + header,
            "size": len(record),
            "end": 2 + header + len(record),
        }
