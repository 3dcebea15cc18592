import pytest

from intervalheap.queue import MaxPriorityQueue

def natural(a, b):
    return (a > b) - (a < b)

@pytest.fixture
def queue():
    return MaxPriorityQueue(natural, [3, 1, 4, 1, 5])

def test_pops_maximum_first(queue):
    assert [queue.pop() for _ in range(len(queue))] == [5, 4, 3, 1, 1]
    assert len(queue) == 0

def test_add_and_peek(queue):
    queue.add(9)
    assert queue.peek() == 9
    assert queue[-1] == 9
    assert queue[0] == 1
    assert len(queue) == 6

def test_reversed_comparator():
    """Swapping the arguments turns the queue into a min-first queue"""
    queue = MaxPriorityQueue(lambda a, b: natural(b, a), [3, 1, 2])
    assert [queue.pop(), queue.pop(), queue.pop()] == [1, 2, 3]

def test_empty_pop():
    queue = MaxPriorityQueue(natural)
    assert not queue
    with pytest.raises(IndexError):
        queue.pop()

def test_clear(queue):
    queue.clear()
    assert len(queue) == 0

def test_repr():
    assert repr(MaxPriorityQueue(natural, [2, 1])) == "MaxPriorityQueue(natural, [1, 2])"
