from collections import deque
from unittest import TestCase

from mock import patch

from seqkit.queue.sequential import SequentialQueue, ListQueue

class TestSequentialQueue(TestCase):
    def setUp(self):
        self.queue = SequentialQueue(name='test')
        self.storage = self.queue._storage

    def test_storage_is_a_deque(self):
        self.assertIsInstance(self.storage, deque)
        self.assertNotIsInstance(self.queue, deque)

    def test_enqueue_appends_to_tail(self):
        self.queue.enqueue(1)
        self.queue.enqueue(2)
        self.assertEqual(deque([1, 2]), self.storage)

    def test_dequeue_removes_from_head(self):
        self.queue.enqueue(1)
        self.queue.enqueue(2)
        self.queue.dequeue()
        self.assertEqual(deque([2]), self.storage)

    def test_flush_clears_storage(self):
        self.queue.enqueue_batch([1, 2, 3])
        self.queue.flush()
        self.assertEqual(0, len(self.storage))

    @patch('seqkit.queue.base.logging')
    def test_flush_logs_count(self, mock_logging):
        self.queue.enqueue_batch([1, 2])
        self.queue.flush()
        mock_logging.debug.assert_called_once_with(
            "Flushed 2 items from <SequentialQueue name='test' length=0>")

class TestListQueue(TestCase):
    def setUp(self):
        self.queue = ListQueue(name='test')

    def test_storage_is_a_list(self):
        self.assertIsInstance(self.queue._storage, list)
        self.assertNotIsInstance(self.queue, list)

    def test_dequeue_shifts_remaining_items(self):
        self.queue.enqueue_batch(['a', 'b', 'c'])
        self.assertEqual('a', self.queue.dequeue())
        self.assertEqual(['b', 'c'], self.queue._storage)

    def test_flush_replaces_storage(self):
        self.queue.enqueue_batch(['a', 'b'])
        self.queue.flush()
        self.assertEqual([], self.queue._storage)
