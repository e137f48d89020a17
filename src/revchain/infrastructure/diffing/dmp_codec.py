"""diff-match-patch backed patch codec."""

from dataclasses import dataclass, field

from diff_match_patch import diff_match_patch, patch_obj

from revchain.domain.exceptions import PatchApplyError


@dataclass(frozen=True)
class PatchDelta:
    """List of diff-match-patch hunks. No hunks means no change."""

    hunks: list[patch_obj] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.hunks


class DiffMatchPatchCodec:
    """PatchCodec using diff-match-patch text patches.

    diff_timeout=0 disables time-bounded diffing so identical inputs always
    produce identical patches. match_threshold=0.0 requires every hunk's
    context to match exactly at its expected location.
    """

    def __init__(self, diff_timeout: float = 0.0, match_threshold: float = 0.0) -> None:
        self._dmp = diff_match_patch()
        self._dmp.Diff_Timeout = diff_timeout
        self._dmp.Match_Threshold = match_threshold

    def diff(self, old_text: str, new_text: str) -> PatchDelta:
        """Compute the patch turning old_text into new_text."""
        diffs = self._dmp.diff_main(old_text, new_text)
        self._dmp.diff_cleanupEfficiency(diffs)
        return PatchDelta(hunks=self._dmp.patch_make(old_text, diffs))

    def to_patch(self, delta: PatchDelta) -> bytes:
        """Serialize delta to the diff-match-patch text format (UTF-8)."""
        return self._dmp.patch_toText(delta.hunks).encode("utf-8")

    def from_patch(self, blob: bytes) -> PatchDelta:
        """Parse a serialized delta."""
        try:
            text = blob.decode("utf-8")
            hunks = self._dmp.patch_fromText(text)
        except (UnicodeDecodeError, ValueError) as e:
            raise PatchApplyError(f"Malformed patch: {e}") from e
        return PatchDelta(hunks=hunks)

    def reverse(self, delta: PatchDelta) -> PatchDelta:
        """Swap inserts and deletes so the delta undoes itself.

        Hunk offsets and context are measured in the text with all earlier
        hunks already applied, so the last hunk has to be undone first.
        """
        reversed_hunks = []
        for hunk in reversed(delta.hunks):
            rev = patch_obj()
            # DIFF_INSERT is 1, DIFF_DELETE is -1, DIFF_EQUAL is 0
            rev.diffs = [(-op, data) for op, data in hunk.diffs]
            rev.start1, rev.start2 = hunk.start2, hunk.start1
            rev.length1, rev.length2 = hunk.length2, hunk.length1
            reversed_hunks.append(rev)
        return PatchDelta(hunks=reversed_hunks)

    def apply(self, delta: PatchDelta, text: str) -> str:
        """Apply delta to text, raising PatchApplyError if any hunk does not fit."""
        if delta.is_empty:
            return text
        result, applied = self._dmp.patch_apply(delta.hunks, text)
        failed = [i for i, ok in enumerate(applied) if not ok]
        if failed:
            raise PatchApplyError(
                f"{len(failed)} of {len(applied)} hunks failed to apply",
                failed_hunks=failed,
            )
        return result
