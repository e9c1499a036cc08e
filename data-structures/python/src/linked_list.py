"""Singly linked list used as a first-in first-out sequence."""


class LinkedList:
    class Node:
        def __init__(self, value):
            self.value = value
            self.next = None

    def __init__(self):
        self._head = None
        self._tail = None
        self._size = 0

    def push_back(self, value):
        node = self.Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self):
        if self._head is None:
            raise IndexError("pop_front from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        return node.value

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0
