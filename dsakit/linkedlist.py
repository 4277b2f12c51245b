"""Singly linked and circular linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: int
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list reached through its head node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> ListNode:
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(f"list index {index} out of range")

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.data

    def insert_first(self, data: int) -> ListNode:
        """Put data at the start of the list and return its node."""
        self.head = ListNode(data, self.head)
        return self.head

    def insert_at_index(self, data: int, index: int) -> ListNode:
        """Put data so that it ends up at the given position."""
        if index == 0:
            return self.insert_first(data)
        previous = self._node_at(index - 1)
        previous.next = ListNode(data, previous.next)
        return previous.next

    def insert_at_end(self, data: int) -> ListNode:
        """Append data after the last node and return its node."""
        new = ListNode(data)
        if self.head is None:
            self.head = new
            return new
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = new
        return new

    def insert_after(self, node: ListNode, data: int) -> ListNode:
        """Put data directly after the given node and return its node."""
        node.next = ListNode(data, node.next)
        return node.next

    def delete_first(self) -> int:
        """Remove the first node and return its data."""
        if self.head is None:
            raise IndexError("delete from empty list")
        data = self.head.data
        self.head = self.head.next
        return data

    def delete_at_index(self, index: int) -> int:
        """Remove the node at the given position and return its data."""
        if index == 0:
            return self.delete_first()
        previous = self._node_at(index - 1)
        target = previous.next
        if target is None:
            raise IndexError(f"list index {index} out of range")
        previous.next = target.next
        return target.data

    def delete_last(self) -> int:
        """Remove the last node and return its data."""
        if self.head is None:
            raise IndexError("delete from empty list")
        if self.head.next is None:
            data = self.head.data
            self.head = None
            return data
        previous = self.head
        while previous.next.next is not None:
            previous = previous.next
        data = previous.next.data
        previous.next = None
        return data

    def delete_value(self, data: int) -> None:
        """Remove the first node holding data."""
        previous: Optional[ListNode] = None
        for node in self._nodes():
            if node.data == data:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node
        raise ValueError(f"element {data} is not in the list")


class CircularList:
    """A circular singly linked list whose last node points back to the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
        if tail is not None:
            tail.next = self.head

    def __iter__(self) -> Iterator[int]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node.data
            node = node.next
            if node is self.head:
                break

    def insert(self, data: int) -> ListNode:
        """Link data in before the head and make it the new head."""
        new = ListNode(data)
        if self.head is None:
            new.next = new
        else:
            last = self.head
            while last.next is not self.head:
                last = last.next
            last.next = new
            new.next = self.head
        self.head = new
        return new