import pytest

from pqueues.core.heap_queue import HeapPriorityQueue
from pqueues.core.sorted_array_queue import SortedArrayPriorityQueue


@pytest.fixture(params=[SortedArrayPriorityQueue, HeapPriorityQueue], ids=["sorted_array", "heap"])
def queue_cls(request):
    return request.param
