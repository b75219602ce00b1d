class QueueError(Exception):
    pass

class EmptyQueueError(QueueError, IndexError):
    """Raised when an item is requested from a queue holding no items.
    Also an IndexError, matching `list.pop` and `deque.popleft`."""

    def __init__(self, message='Queue is empty'):
        super(EmptyQueueError, self).__init__(message)
