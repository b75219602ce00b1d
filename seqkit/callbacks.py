"""Callers pass plain lambdas to the collection helpers, and a lambda
written as `lambda item: ...` should not have to accept the index and
source arguments the helpers can supply. `bind_callback` wraps a callback
so it only ever receives as many positional arguments as it declares."""

import inspect

def positional_arity(callback):
    """Number of positional arguments `callback` accepts, or None when it
    takes `*args`. Callables without an introspectable signature are
    treated as taking a single argument."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return 1
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY,
                              inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count

def bind_callback(callback):
    arity = positional_arity(callback)
    if arity is None:
        return callback

    def bound(*args):
        return callback(*args[:arity])
    return bound
