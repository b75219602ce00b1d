from .base import Queue
from .sequential import SequentialQueue, ListQueue
