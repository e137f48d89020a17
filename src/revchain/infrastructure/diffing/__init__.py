"""Text delta codecs."""

from revchain.infrastructure.diffing.dmp_codec import DiffMatchPatchCodec, PatchDelta

__all__ = [
    "DiffMatchPatchCodec",
    "PatchDelta",
]
