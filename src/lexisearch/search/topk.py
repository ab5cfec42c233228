"""Bounded top-k selection over a stream of scored documents.

The selector keeps at most ``capacity`` entries. Admission compares a new
candidate against the weakest retained entry through a min-heap, while
extraction pops the strongest entry through a max-heap. Both heaps share the
same entry objects; an entry removed through one heap is marked dead and
skipped when it surfaces in the other.

Ordering among equal scores is by arrival: the earliest offered entry is the
strongest, so it drains first and is evicted last. A later candidate with a
score equal to the weakest retained entry never evicts it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import heapq

from lexisearch.search.models import ScoredDocument


@dataclass(slots=True)
class _Entry:
    score: float
    doc_id: int
    sequence: int
    alive: bool = True


class BoundedTopK:
    """Fixed-capacity priority structure retaining the highest scores seen."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._weakest: list[tuple[float, int, _Entry]] = []
        self._strongest: list[tuple[float, int, _Entry]] = []
        self._size = 0
        self._sequence = 0

    def insert(self, score: float, doc_id: int) -> bool:
        """Offer a candidate; return True when it was retained."""

        if self.capacity == 0:
            return False

        if self._size >= self.capacity:
            weakest = self._peek_alive(self._weakest)
            if score <= weakest.score:
                return False
            heapq.heappop(self._weakest)
            weakest.alive = False
            self._size -= 1

        entry = _Entry(score=score, doc_id=doc_id, sequence=self._sequence)
        self._sequence += 1
        heapq.heappush(self._weakest, (score, -entry.sequence, entry))
        heapq.heappush(self._strongest, (-score, entry.sequence, entry))
        self._size += 1
        self._compact()
        return True

    def peek_best(self) -> ScoredDocument | None:
        if self._size == 0:
            return None
        entry = self._peek_alive(self._strongest)
        return ScoredDocument(doc_id=entry.doc_id, score=entry.score)

    def extract_best(self) -> ScoredDocument:
        """Remove and return the highest scoring retained entry."""

        if self._size == 0:
            raise IndexError("extract_best from an empty selector")
        entry = self._peek_alive(self._strongest)
        heapq.heappop(self._strongest)
        entry.alive = False
        self._size -= 1
        return ScoredDocument(doc_id=entry.doc_id, score=entry.score)

    def drain(self) -> Iterator[ScoredDocument]:
        """Yield every retained entry in descending score order, emptying the selector."""
        while self._size:
            yield self.extract_best()

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    @staticmethod
    def _peek_alive(heap: list[tuple[float, int, _Entry]]) -> _Entry:
        while not heap[0][2].alive:
            heapq.heappop(heap)
        return heap[0][2]

    def _compact(self) -> None:
        # Dead entries are dropped lazily; rebuild once they outnumber live ones.
        if len(self._weakest) > 2 * self._size + 1:
            self._weakest = [item for item in self._weakest if item[2].alive]
            heapq.heapify(self._weakest)
        if len(self._strongest) > 2 * self._size + 1:
            self._strongest = [item for item in self._strongest if item[2].alive]
            heapq.heapify(self._strongest)
