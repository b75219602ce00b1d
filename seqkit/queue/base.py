import sys
import logging

from ..errors import EmptyQueueError
from ..registrar import EventHandlerRegistrar

class Queue(object):
    """Abstract class for creating storage-specific queue implementations.
    Your implementation should override all private methods and alter any
    class attributes (e.g. MAX_DEQUEUE_BATCH_SIZE) that do not apply to it.

    The queue is deliberately not a sequence: items go in at the tail and
    come out at the head, and nothing else about the storage is exposed."""

    MAX_ENQUEUE_BATCH_SIZE = sys.maxsize
    MAX_DEQUEUE_BATCH_SIZE = sys.maxsize

    def __init__(self, items=None, name=None):
        self.name = name
        self.events = EventHandlerRegistrar(self)
        self._storage = self._create_storage()

        self._enqueued = 0
        self._dequeued = 0
        self._flushed = 0

        if items is not None:
            for item in items:
                self.enqueue(item)

    def __len__(self):
        return self._length()

    def __repr__(self):
        return '<{} name={!r} length={}>'.format(type(self).__name__, self.name, self._length())

    def _create_storage(self):
        raise NotImplementedError()

    def _enqueue(self, item):
        raise NotImplementedError()

    def _dequeue(self):
        raise NotImplementedError()

    def _peek(self):
        raise NotImplementedError()

    def _length(self):
        raise NotImplementedError()

    def _flush(self):
        raise NotImplementedError()

    @property
    def length(self):
        return self._length()

    def is_empty(self):
        return self._length() == 0

    def enqueue(self, item):
        self._enqueue(item)
        self._enqueued += 1
        self.events.on_enqueue(item)

    def dequeue(self):
        self._raise_if_empty()
        item = self._dequeue()
        self._dequeued += 1
        self.events.on_dequeue(item)
        return item

    def peek(self):
        self._raise_if_empty()
        return self._peek()

    def enqueue_batch(self, items):
        """Enqueues every item in order and returns how many were
        enqueued. An oversized batch is rejected before anything is
        enqueued."""
        items = list(items)
        if len(items) > self.MAX_ENQUEUE_BATCH_SIZE:
            raise ValueError("Batch size cannot exceed {}.".format(self.MAX_ENQUEUE_BATCH_SIZE))
        for item in items:
            self.enqueue(item)
        return len(items)

    def dequeue_batch(self, batch_size):
        """Dequeues up to `batch_size` items in FIFO order. Returns fewer
        items, possibly none, if the queue runs out first."""
        if isinstance(batch_size, bool) or not isinstance(batch_size, int):
            raise TypeError("Batch size must be int, received {!r}.".format(batch_size))
        if batch_size > self.MAX_DEQUEUE_BATCH_SIZE:
            raise ValueError("Batch size cannot exceed {}.".format(self.MAX_DEQUEUE_BATCH_SIZE))
        if batch_size < 0:
            raise ValueError("Batch size cannot be negative, received {}.".format(batch_size))
        batch = []
        for _ in range(batch_size):
            if self.is_empty():
                break
            batch.append(self.dequeue())
        return batch

    def flush(self):
        count = self._length()
        self._flush()
        self._flushed += count
        logging.debug("Flushed {} items from {!r}".format(count, self))
        self.events.on_flush(count)
        return count

    def stats(self):
        return {'available': self._length(),
                'enqueued': self._enqueued,
                'dequeued': self._dequeued,
                'flushed': self._flushed}

    def _raise_if_empty(self):
        if self._length() == 0:
            self.events.on_empty()
            raise EmptyQueueError()
