"""Stateless helpers over small in-memory lists. None of these mutate
their input except `sort_objects_by_name`, which sorts in place."""

import math
import numbers
import unicodedata

from .callbacks import bind_callback

NAN = float('nan')

_NON_DECIMAL_PREFIXES = ('0x', '0o', '0b')
_REJECTED_FLOAT_WORDS = ('inf', 'infinity', 'nan')

def _string_to_number(text):
    text = text.strip()
    if not text:
        return 0
    # int() and float() accept digits from any script
    if not text.isascii():
        return NAN
    if text in ('Infinity', '+Infinity'):
        return float('inf')
    if text == '-Infinity':
        return float('-inf')
    if '_' in text or text.lstrip('+-').lower() in _REJECTED_FLOAT_WORDS:
        return NAN
    try:
        return int(text)
    except ValueError:
        pass
    if text[:2].lower() in _NON_DECIMAL_PREFIXES:
        try:
            return int(text, 0)
        except ValueError:
            return NAN
    try:
        return float(text)
    except ValueError:
        return NAN

def to_number(value):
    """Coerce `value` the way JavaScript's `Number()` does, returning NaN
    for anything that has no numeric reading. A list reads as its single
    element (an empty list as 0), mirroring how `Number()` stringifies arrays;
    lists of several items, and booleans inside a list, give NaN."""
    if isinstance(value, bool):
        return int(value)
    if value is None:
        return 0
    if isinstance(value, numbers.Real):
        return value
    if isinstance(value, str):
        return _string_to_number(value)
    if isinstance(value, list):
        if not value:
            return 0
        if len(value) == 1 and not isinstance(value[0], bool):
            return to_number(value[0])
    return NAN

def convert_to_numbers(values):
    result = []
    for value in values:
        number = to_number(value)
        if not math.isnan(number):
            result.append(number)
    return result

def count_matches(values, predicate):
    return sum(1 for value in values if predicate(value))

def filter_items(values, predicate):
    """Keep the items for which `predicate(item, index, values)` is truthy.
    The predicate may declare fewer arguments."""
    predicate = bind_callback(predicate)
    return [item for index, item in enumerate(values) if predicate(item, index, values)]

def map_items(values, callback):
    callback = bind_callback(callback)
    return [callback(item, index) for index, item in enumerate(values)]

def number_lines(lines):
    return ['{:02d}: {}'.format(number, line) for number, line in enumerate(lines, 1)]

def remove_empty_lines(lines):
    return [line for line in lines if line != '']

def _collation_key(name):
    decomposed = unicodedata.normalize('NFKD', name)
    folded = ''.join(char for char in decomposed if not unicodedata.combining(char))
    marks = ''.join(char for char in decomposed if unicodedata.combining(char))
    return folded.casefold(), marks, name.swapcase()

def sort_objects_by_name(objects):
    # base letter first, then accents, then case with lowercase ahead
    objects.sort(key=lambda obj: _collation_key(obj['name']))
    return objects
