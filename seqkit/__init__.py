from .errors import QueueError, EmptyQueueError
from .registrar import EventHandlerRegistrar
from .queue import Queue, SequentialQueue, ListQueue
from .arrays import (convert_to_numbers, count_matches, filter_items, map_items,
                     number_lines, remove_empty_lines, sort_objects_by_name, to_number)
from .objects import find_key, omit
