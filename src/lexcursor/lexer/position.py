"""Line/column lookup for lexer error reporting.

Line Ending Support:
    LF and CRLF are supported (\\n is the line delimiter). CR-only input
    reports every offset on line 1.
"""

from lexcursor.diagnostics import SourceSpan

__all__ = ["LineOffsetCache"]


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search.

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> cache = LineOffsetCache(source)
        >>> cache.get_line_col(0)   # Start of line 1
        (1, 1)
        >>> cache.get_line_col(6)   # Start of line 2
        (2, 1)
        >>> cache.get_line_col(8)   # Third char of line 2
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Character position in source (0-indexed, clamped to the source)

        Returns:
            (line, column) tuple (1-indexed, like text editors)
        """
        if pos < 0:
            pos = 0
        elif pos > self._source_len:
            pos = self._source_len

        # Line index = index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)

    def span(self, start: int, end: int) -> SourceSpan:
        """Build a SourceSpan for [start, end) with the line/column of start."""
        line, column = self.get_line_col(start)
        return SourceSpan(start=start, end=end, line=line, column=column)
