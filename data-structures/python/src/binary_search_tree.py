"""Unbalanced binary search tree.

Values strictly greater than a node go to its right subtree; equal or
smaller values go left, so duplicates are allowed and collect on the left.
No rebalancing is ever done.
"""

import copy
import logging
from typing import TypeVar, Generic, List, Iterator, Optional, Callable, Tuple

from linked_list import LinkedList

T = TypeVar('T')

logger = logging.getLogger(__name__)


class NotFoundError(ValueError):
    """Raised by ``remove`` when no node holds an equal value."""

    def __init__(self, value) -> None:
        super().__init__(f"value not found in tree: {value!r}")
        self.value = value


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        # nodes compare by value only
        def __eq__(self, other: object) -> bool:
            if not isinstance(other, BinarySearchTree.Node):
                return NotImplemented
            return self.value == other.value

        def __lt__(self, other: 'BinarySearchTree.Node') -> bool:
            return self.value < other.value

        def __le__(self, other: 'BinarySearchTree.Node') -> bool:
            return self.value <= other.value

        def __gt__(self, other: 'BinarySearchTree.Node') -> bool:
            return self.value > other.value

        def __ge__(self, other: 'BinarySearchTree.Node') -> bool:
            return self.value >= other.value

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def insert(self, value: T) -> int:
        """Add ``value`` and return the new size. Duplicates are kept."""
        new_node = BinarySearchTree.Node(value)
        if self._root is None:
            self._root = new_node
        else:
            node = self._root
            while True:
                if value > node.value:
                    if node.right is None:
                        node.right = new_node
                        break
                    node = node.right
                else:
                    if node.left is None:
                        node.left = new_node
                        break
                    node = node.left
        self._size += 1
        logger.debug("inserted %r, size is now %d", value, self._size)
        return self._size

    def search(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            if node.value > value:
                node = node.left
            else:
                node = node.right
        return False

    def remove(self, value: T) -> int:
        """Remove the first node on the search path equal to ``value``.

        Returns the new size. Raises NotFoundError, leaving the tree
        untouched, when the walk runs off the tree without a match.

        A node with two children is replaced by its in-order successor
        (the leftmost node of its right subtree). The successor node is
        moved, not copied, so its own right subtree travels with it or is
        handed to its former parent.
        """
        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None and node.value != value:
            parent = node
            if node.value > value:
                node = node.left
                is_left_child = True
            else:
                node = node.right
                is_left_child = False

        if node is None:
            logger.debug("remove of %r failed, value not in tree", value)
            raise NotFoundError(value)

        left, right = node.left, node.right
        node.left = None
        node.right = None

        if left is None and right is None:
            replacement = None
            case = "leaf"
        elif right is None:
            replacement = left
            case = "left child only"
        elif left is None:
            replacement = right
            case = "right child only"
        else:
            replacement = self._detach_successor(right)
            replacement.left = left
            case = "two children"

        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement

        self._size -= 1
        logger.debug("removed %r (%s), size is now %d", value, case, self._size)
        return self._size

    def display(self, write: Callable[[str], None] = print) -> int:
        """Write every value in order through ``write``; return the count."""
        count = 0
        for node in self._walk_in_order(self._root):
            write(str(node.value))
            count += 1
        return count

    def in_order(self) -> List[T]:
        return [node.value for node in self._walk_in_order(self._root)]

    def clone(self) -> 'BinarySearchTree[T]':
        """Deep copy: new nodes, each value copied with ``copy.deepcopy``."""
        tree: BinarySearchTree[T] = BinarySearchTree()
        created = 0
        if self._root is not None:
            tree._root = BinarySearchTree.Node(copy.deepcopy(self._root.value))
            created = 1
            pending: List[Tuple[BinarySearchTree.Node, BinarySearchTree.Node]] = [
                (self._root, tree._root)
            ]
            while pending:
                source, target = pending.pop()
                if source.left is not None:
                    target.left = BinarySearchTree.Node(copy.deepcopy(source.left.value))
                    pending.append((source.left, target.left))
                    created += 1
                if source.right is not None:
                    target.right = BinarySearchTree.Node(copy.deepcopy(source.right.value))
                    pending.append((source.right, target.right))
                    created += 1
        assert created == self._size, f"cloned {created} nodes, tree has {self._size}"
        tree._size = created
        logger.debug("cloned tree of %d nodes", created)
        return tree

    def into_iter(self) -> 'TreeIterator[T]':
        """Move this tree's nodes into a one-shot in-order iterator.

        The tree is left empty.
        """
        root, size = self._root, self._size
        self._root = None
        self._size = 0
        return TreeIterator(root, size)

    def _detach_successor(self, right: Node) -> Node:
        if right.left is None:
            return right
        successor_parent = right
        successor = right.left
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        successor_parent.left = successor.right
        successor.right = right
        return successor

    @staticmethod
    def _walk_in_order(node: Optional[Node]) -> Iterator[Node]:
        stack: List[BinarySearchTree.Node] = []
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __deepcopy__(self, memo: dict) -> 'BinarySearchTree[T]':
        return self.clone()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"


class TreeIterator(Generic[T]):
    """Drains a pre-computed in-order sequence of nodes, front to back.

    Once exhausted it stays exhausted; build a new tree to iterate again.
    """

    def __init__(self, root: Optional[BinarySearchTree.Node], size: int) -> None:
        self._nodes = LinkedList()
        for node in BinarySearchTree._walk_in_order(root):
            self._nodes.push_back(node)
        assert len(self._nodes) == size, (
            f"in-order walk found {len(self._nodes)} nodes, tree has {size}"
        )
        logger.debug("iterator built over %d nodes", size)

    def __iter__(self) -> 'TreeIterator[T]':
        return self

    def __next__(self) -> T:
        if self._nodes.is_empty():
            raise StopIteration
        return self._nodes.pop_front().value

    def __len__(self) -> int:
        return len(self._nodes)
