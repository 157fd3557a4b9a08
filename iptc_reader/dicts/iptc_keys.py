"""
IPTC tag name translations

Maps dataset numbers of the IPTC-NAA Application record (record 2) to
human-readable names.

Reference: https://www.iptc.org/std/IIM/4.2/specification/IIMV4.2.pdf
Reference: https://exiftool.org/TagNames/IPTC.html#ApplicationRecord
"""

from types import MappingProxyType

IPTC_KEYS = MappingProxyType(
    {
        0x00: "ApplicationRecordVersion",
        0x03: "ObjectTypeReference",
        0x04: "ObjectAttributeReference",
        0x05: "ObjectName",
        0x07: "EditStatus",
        0x08: "EditorialUpdate",
        0x0A: "Urgency",
        0x0C: "SubjectReference",
        0x0F: "Category",
        0x14: "SupplementalCategories",
        0x16: "FixtureIdentifier",
        0x19: "Keywords",
        0x1A: "ContentLocationCode",
        0x1B: "ContentLocationName",
        0x1E: "ReleaseDate",
        0x23: "ReleaseTime",
        0x25: "ExpirationDate",
        0x26: "ExpirationTime",
        0x28: "SpecialInstructions",
        0x2A: "ActionAdvised",
        0x2D: "ReferenceService",
        0x2F: "ReferenceDate",
        0x32: "ReferenceNumber",
        0x37: "DateCreated",
        0x3C: "TimeCreated",
        0x3E: "DigitalCreationDate",
        0x3F: "DigitalCreationTime",
        0x41: "OriginatingProgram",
        0x46: "ProgramVersion",
        0x4B: "ObjectCycle",
        0x50: "Byline",
        0x55: "BylineTitle",
        0x5A: "City",
        0x5C: "Sublocation",
        0x5F: "State",
        0x64: "CountryCode",
        0x65: "Country",
        0x67: "OriginalTransmissionReference",
        0x69: "Headline",
        0x6E: "Credit",
        0x73: "Source",
        0x74: "CopyrightNotice",
        0x76: "Contact",
        0x78: "Caption",  # Caption/Abstract
        0x79: "LocalCaption",
        0x7A: "Writer",  # Writer/Editor
        0x7D: "RasterizedCaption",
        0x82: "ImageType",
        0x83: "ImageOrientation",
        0x87: "LanguageIdentifier",
        0x96: "AudioType",
        0x97: "AudioSamplingRate",
        0x98: "AudioSamplingResolution",
        0x99: "AudioDuration",
        0x9A: "AudioOutcue",
        0xB8: "JobID",
        0xB9: "MasterDocumentID",
        0xBA: "ShortDocumentID",
        0xBB: "UniqueDocumentID",
        0xBC: "OwnerID",
        0xC8: "ObjectPreviewFileFormat",
        0xC9: "ObjectPreviewFileVersion",
        0xCA: "ObjectPreviewData",
        0xDD: "Prefs",
        0xE1: "ClassifyState",
        0xE4: "SimilarityIndex",
        0xE6: "DocumentNotes",
        0xE7: "DocumentHistory",
        0xE8: "ExifCameraInfo",
        0xFF: "CatalogSets",
    }
)
