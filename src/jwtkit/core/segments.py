from __future__ import annotations

import base64
import binascii
import re

from jwtkit.core.exceptions import SegmentDecodingError

_SEGMENT_ALPHABET = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def encode_segment(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_segment(segment: str) -> bytes:
    """Decode a base64url segment, with or without its trailing padding.

    Only the canonical encoding of a byte string is accepted, so two different
    segments never decode to the same bytes.
    """
    if not _SEGMENT_ALPHABET.fullmatch(segment):
        raise SegmentDecodingError("Segment contains characters outside the base64url alphabet.")

    unpadded = segment.rstrip("=")
    if unpadded != segment and len(segment) % 4:
        raise SegmentDecodingError("Segment has incorrect padding.")
    if len(unpadded) % 4 == 1:
        raise SegmentDecodingError("Segment length is not a valid base64url length.")

    try:
        decoded = base64.b64decode(unpadded + "=" * (-len(unpadded) % 4), altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SegmentDecodingError(f"Invalid base64url segment: {exc}") from exc

    if encode_segment(decoded) != unpadded:
        raise SegmentDecodingError("Segment is not canonically encoded.")
    return decoded
