import logging

class EventHandlerRegistrar(object):
    """Fans queue events out to registered handlers. A handler is any
    object; it receives only the `on_{event}` methods it defines.

    - on_enqueue(item) : item was appended to the tail
    - on_dequeue(item) : item was removed from the head
    - on_empty()       : dequeue or peek was attempted on an empty queue
    - on_flush(count)  : the queue dropped `count` items

    Events fire after the queue operation has completed. An exception
    raised by a handler is logged and does not change the outcome of the
    operation or stop the remaining handlers from running."""

    EVENTS = ('on_enqueue', 'on_dequeue', 'on_empty', 'on_flush')

    def __init__(self, queue):
        self._queue = queue
        self._handlers = []

        for name in self.EVENTS:
            self.create_proxy_method(name)

    @property
    def handlers(self):
        return tuple(self._handlers)

    def register(self, handler):
        """Registers a handler to receive events."""
        if handler not in self._handlers:
            self._handlers.append(handler)
            if hasattr(handler, 'on_register'):
                handler.on_register(self._queue)

    def unregister(self, handler):
        if handler in self._handlers:
            self._handlers.remove(handler)

    def clear(self):
        self._handlers = []

    def create_proxy_method(self, name):
        def proxy_method(*args, **kwargs):
            for handler in list(self._handlers):
                if not hasattr(handler, name):
                    continue
                try:
                    getattr(handler, name)(*args, **kwargs)
                except Exception:
                    logging.exception("Error in {} handler {!r} for {!r}".format(name, handler, self._queue))
        setattr(self, name, proxy_method)
