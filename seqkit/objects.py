from .callbacks import bind_callback

def find_key(mapping, predicate):
    """Return the first key, in iteration order, whose value satisfies
    `predicate(value, key)`, or None if no value does."""
    predicate = bind_callback(predicate)
    for key, value in mapping.items():
        if predicate(value, key):
            return key
    return None

def omit(mapping, *keys):
    excluded = set(keys)
    return {key: value for key, value in mapping.items() if key not in excluded}
