"""A singly linked list whose nodes carry arbitrary content."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Release = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One list cell: its content and the following node."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list of contents, appended at the front or the back."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, release: Release = None) -> None:
        """Remove the first node, handing its content to ``release`` if given."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if release is not None:
            release(node.content)

    def clear(self, release: Release = None) -> None:
        """Remove every node, handing each content to ``release`` in order."""
        while self.head is not None:
            self.pop_front(release)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content from front to back."""
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any], release: Release = None) -> "LinkedList":
        """Return a new list of ``func(content)`` for each content.

        If ``func`` raises, the contents built so far go to ``release`` and
        the exception propagates.
        """
        result = LinkedList()
        try:
            for node in self._nodes():
                result.push_back(func(node.content))
        except BaseException:
            result.clear(release)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())