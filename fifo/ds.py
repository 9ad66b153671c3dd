from __future__ import annotations

import logging
from enum import Enum
from typing import Generic, Iterable, Iterator, TypeVar

from option import Result, Ok, Err

T = TypeVar('T')

logger = logging.getLogger(__name__)


class QueueErrors(Enum):
    EmptyQueue = "empty queue"

    def __str__(self):
        return self.value


class Queue(Generic[T]):
    """
    FIFO container backed by a list. Elements go in at the tail and come out at the head.

    Reads that need an element (dequeue, front, peek_last) return a Result,
    Err(QueueErrors.EmptyQueue) when there is nothing to read.

    str() renders each element with Python's str(), e.g. "Queue: [True 1.0]".
    It is meant for display, not for parsing back.
    """
    __content: list[T]

    def __init__(self, *args: T) -> None:
        self.__content = list(args)

    def enqueue(self, item: T) -> None:
        self.__content.append(item)

    def extend(self, items: Iterable[T]) -> None:
        self.__content.extend(items)

    def dequeue(self) -> Result[T, QueueErrors]:
        if len(self.__content) < 1:
            logger.debug("dequeue on %s", QueueErrors.EmptyQueue)
            return Err(QueueErrors.EmptyQueue)
        return Ok(self.__content.pop(0))

    def front(self) -> Result[T, QueueErrors]:
        if len(self.__content) < 1:
            logger.debug("front on %s", QueueErrors.EmptyQueue)
            return Err(QueueErrors.EmptyQueue)
        return Ok(self.__content[0])

    def peek_last(self) -> Result[T, QueueErrors]:
        if len(self.__content) < 1:
            logger.debug("peek_last on %s", QueueErrors.EmptyQueue)
            return Err(QueueErrors.EmptyQueue)
        return Ok(self.__content[-1])

    def is_empty(self) -> bool:
        return len(self.__content) == 0

    def size(self) -> int:
        return len(self.__content)

    def clear(self) -> None:
        self.__content = []

    def contains(self, item: T) -> bool:
        # == only, no identity shortcut, same as remove
        return any(element == item for element in self.__content)

    def remove(self, item: T) -> bool:
        """Removes the first element equal to `item`, counting from the head."""
        for i, element in enumerate(self.__content):
            if element == item:
                del self.__content[i]
                return True
        logger.debug("remove found no element equal to %r", item)
        return False

    def to_list(self) -> list[T]:
        return self.__content.copy()

    def copy(self) -> Queue[T]:
        return Queue(*self.__content)

    def reverse(self) -> None:
        self.__content.reverse()

    def __len__(self) -> int:
        return len(self.__content)

    def __contains__(self, item: T) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[T]:
        # snapshot, the queue may be mutated while iterating
        return iter(self.to_list())

    def __iadd__(self, items: Iterable[T]) -> Queue[T]:
        self.extend(items)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self.__content == other.__content

    def __str__(self) -> str:
        return "Queue: [" + " ".join(str(i) for i in self.__content) + "]"

    def __repr__(self) -> str:
        return "Queue(" + ", ".join(repr(i) for i in self.__content) + ")"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    q = Queue[int]()
    q.enqueue(10)
    q.enqueue(20)
    q.enqueue(30)
    print(q)
    print("Front: " + str(q.front().unwrap()))
    print("Dequeued: " + str(q.dequeue().unwrap()))
    print(q.is_empty())
    q.clear()
    print(q.is_empty())
    res = q.dequeue()
    if res.is_err:
        print(res.unwrap_err())
