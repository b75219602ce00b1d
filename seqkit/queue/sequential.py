from collections import deque

from .base import Queue

class SequentialQueue(Queue):
    """FIFO queue backed by a privately held deque. Enqueue, dequeue
    and peek are all O(1)."""

    def _create_storage(self):
        return deque()

    def _enqueue(self, item):
        self._storage.append(item)

    def _dequeue(self):
        return self._storage.popleft()

    def _peek(self):
        return self._storage[0]

    def _length(self):
        return len(self._storage)

    def _flush(self):
        self._storage.clear()

class ListQueue(Queue):
    """FIFO queue backed by a dense list. Dequeue shifts every remaining
    item, so it is O(n); prefer SequentialQueue outside of comparisons."""

    def _create_storage(self):
        return []

    def _enqueue(self, item):
        self._storage.append(item)

    def _dequeue(self):
        return self._storage.pop(0)

    def _peek(self):
        return self._storage[0]

    def _length(self):
        return len(self._storage)

    def _flush(self):
        self._storage = []
