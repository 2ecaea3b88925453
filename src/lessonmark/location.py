"""Source location tracking for blocks.

Provides SourceLocation dataclass recording which source lines a block
was built from. Used by the renderer for debugging output and by tests
to check that every input line is accounted for.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Inclusive line range of a block in the source document.

    All positions are 1-indexed.

    Attributes:
        lineno: First source line consumed by the block
        end_lineno: Last source line consumed by the block
        source_file: Source file path (optional, for lesson files)

    Examples:
            >>> SourceLocation(3, 5)
            SourceLocation(lineno=3, end_lineno=5, source_file=None)

            >>> str(SourceLocation(2, 2, "lessons/intro.md"))
            'lessons/intro.md:2'

    """

    lineno: int
    end_lineno: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for log messages.

        Returns:
            Formatted string like "file.md:10", "10" or "10-12"
        """
        span = str(self.lineno)
        if self.end_lineno != self.lineno:
            span = f"{self.lineno}-{self.end_lineno}"
        if self.source_file:
            return f"{self.source_file}:{span}"
        return span

    @property
    def line_count(self) -> int:
        """Number of source lines covered."""
        return self.end_lineno - self.lineno + 1
