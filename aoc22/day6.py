"""Day 6: start-of-packet marker detection."""

from collections import deque


class MarkerDetector:
    """Finds the end of the first run of `capacity` distinct characters.

    The detector keeps its state between calls, so a stream may be fed to
    it in several chunks.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.position = 0
        self._window: deque[str] = deque()
        self._seen: set[str] = set()

    def read(self, chunk: str) -> int | None:
        """Feed a chunk; return the marker's end position once found, else None."""
        for char in chunk:
            while len(self._window) == self.capacity or char in self._seen:
                self._seen.discard(self._window.popleft())
            self._window.append(char)
            self._seen.add(char)
            self.position += 1
            if len(self._seen) == self.capacity:
                return self.position
        return None


def find_marker(text: str, capacity: int) -> int | None:
    """Return the position just after the first marker in text, or None."""
    return MarkerDetector(capacity).read(text)


def run(path: str, window_size: int) -> None:
    """Print the position of the first marker of window_size in the file."""
    detector = MarkerDetector(window_size)
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            index = detector.read(raw.rstrip("\r\n"))
            if index is not None:
                print(index)
                return
    raise ValueError("no marker found")