"""Substitution report for a transcoding pass."""

from dataclasses import dataclass, field


@dataclass
class TranscodeResult:
    """
    What a decode or encode pass had to substitute.

    Offsets are byte offsets into the input for decoding and character
    offsets into the input for encoding.
    """
    input_size: int
    output_size: int
    substitutions: int = 0
    offsets: list[int] = field(default_factory=list)

    @property
    def was_lossy(self) -> bool:
        """True if any unit was replaced by a placeholder."""
        return self.substitutions > 0

    def record(self, offset: int) -> None:
        self.substitutions += 1
        self.offsets.append(offset)
