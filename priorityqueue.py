from typing import Any, Iterator, List, Optional, Tuple


class PQNode: # Node of the duplicate-aware priority tree
    __slots__ = ("priority", "value", "dup", "parent", "link", "left", "right")

    def __init__(self, priority: int, value: Any):
        self.priority = priority # key used to place the node in the BST
        self.value = value
        self.dup = False # True when reachable only through a duplicate chain
        self.parent: Optional[int] = None # non-owning, used for upward moves only
        self.link: Optional[int] = None # next node with the same priority
        self.left: Optional[int] = None
        self.right: Optional[int] = None


class PriorityQueue:
    """
    Binary search tree keyed by integer priority. Nodes sharing a priority are
    chained off a single tree position (the duplicate chain) so equal priorities
    come out in arrival order.

    Nodes live in an arena list and refer to each other by index. Released slots
    go on a free list and are reused by later enqueues.
    """

    def __init__(self):
        self._nodes: List[Optional[PQNode]] = [] # arena
        self._free: List[int] = [] # released arena slots
        self._root: Optional[int] = None
        self._size = 0
        self._curr: Optional[int] = None # traversal cursor, see begin()/next()

    # Arena management

    def _alloc(self, value, priority: int) -> int:
        node = PQNode(priority, value)
        if self._free:
            idx = self._free.pop()
            self._nodes[idx] = node
        else:
            idx = len(self._nodes)
            self._nodes.append(node)
        return idx

    def _release(self, idx: int) -> None:
        if self._nodes[idx] is None:
            raise RuntimeError(f"node {idx} released twice")
        self._nodes[idx] = None
        self._free.append(idx)

    def live_nodes(self) -> int: # occupied arena slots, always equal to size()
        return len(self._nodes) - len(self._free)

    def root_index(self) -> Optional[int]: # testing hook
        return self._root

    def _leftmost(self, idx: Optional[int]) -> Optional[int]:
        if idx is None:
            return None
        while self._nodes[idx].left is not None:
            idx = self._nodes[idx].left
        return idx

    # Core operations

    def enqueue(self, value, priority: int) -> None:
        """
        Walk down from the root: right on larger priority, left on smaller.
        An equal priority appends the value to the end of that node's duplicate
        chain, otherwise it becomes a new leaf. The tree is never rebalanced.
        """
        new = self._alloc(value, priority)
        self._size += 1

        if self._root is None:
            self._root = new
            return

        cur = self._root
        while True:
            node = self._nodes[cur]
            if priority > node.priority:
                if node.right is None:
                    node.right = new
                    self._nodes[new].parent = cur
                    return
                cur = node.right
            elif priority < node.priority:
                if node.left is None:
                    node.left = new
                    self._nodes[new].parent = cur
                    return
                cur = node.left
            else:
                # duplicate: walk to the tail of the chain
                while node.link is not None:
                    cur = node.link
                    node = self._nodes[cur]
                node.link = new
                dup = self._nodes[new]
                dup.dup = True
                dup.parent = cur
                return

    def dequeue(self, default=None):
        """
        Remove and return the value with the smallest priority. Among equal
        priorities the earliest enqueued value comes out first. Returns
        `default` when the queue is empty.
        """
        if self._root is None:
            return default

        cur = self._leftmost(self._root)
        node = self._nodes[cur]
        parent = node.parent

        if node.link is not None:
            # chain head takes over this tree position
            head_idx = node.link
            head = self._nodes[head_idx]
            head.dup = False
            head.parent = parent
            head.left = node.left
            head.right = node.right
            if head.left is not None:
                self._nodes[head.left].parent = head_idx
            if head.right is not None:
                self._nodes[head.right].parent = head_idx
            if parent is None:
                self._root = head_idx
            else:
                self._nodes[parent].left = head_idx
        elif node.right is not None:
            # promote the right subtree
            self._nodes[node.right].parent = parent
            if parent is None:
                self._root = node.right
            else:
                self._nodes[parent].left = node.right
        else:
            if parent is None:
                self._root = None
            else:
                self._nodes[parent].left = None

        value = node.value
        self._release(cur)
        self._size -= 1
        self._curr = None
        return value

    def peek(self, default=None):
        if self._root is None:
            return default
        return self._nodes[self._leftmost(self._root)].value

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    # In-order traversal

    def begin(self) -> None:
        """Reset the cursor so the next call to next() yields the first in-order element."""
        self._curr = self._leftmost(self._root)

    def next(self) -> Optional[Tuple[Any, int]]:
        """
        Return (value, priority) at the cursor and advance it, or None once the
        traversal is exhausted. Duplicates are yielded right after their primary
        node, before anything in its right subtree.
        """
        if self._curr is None:
            return None

        node = self._nodes[self._curr]
        out = (node.value, node.priority)

        if node.link is not None:
            self._curr = node.link
            return out

        # climb back out of the chain to its primary node
        cur = self._curr
        while self._nodes[cur].dup:
            cur = self._nodes[cur].parent
        node = self._nodes[cur]

        if node.right is not None:
            self._curr = self._leftmost(node.right)
            return out

        # ascend until we come up from a left child
        child, parent = cur, node.parent
        while parent is not None and self._nodes[parent].left != child:
            child, parent = parent, self._nodes[parent].parent
        self._curr = parent
        return out

    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        # shares the single cursor: don't mutate or start another traversal mid-loop
        self.begin()
        while True:
            item = self.next()
            if item is None:
                return
            yield item

    # Whole-structure operations

    def clear(self) -> None:
        """Release every node once, visiting left, right, chain, then the node itself."""
        stack = [(self._root, False)] if self._root is not None else []
        while stack:
            idx, expanded = stack.pop()
            if expanded:
                self._release(idx)
                self._size -= 1
                continue
            node = self._nodes[idx]
            stack.append((idx, True))
            for child in (node.link, node.right, node.left):
                if child is not None:
                    stack.append((child, False))
        self._nodes.clear()
        self._free.clear()
        self._root = None
        self._curr = None
        self._size = 0

    def _preorder(self) -> Iterator[PQNode]:
        # node, duplicate chain, left subtree, right subtree
        stack = [self._root] if self._root is not None else []
        while stack:
            node = self._nodes[stack.pop()]
            yield node
            for child in (node.right, node.left, node.link):
                if child is not None:
                    stack.append(child)

    def assign(self, other: "PriorityQueue") -> "PriorityQueue":
        """Make this queue an independent copy of `other` (clears first)."""
        if other is self:
            return self
        self.clear()
        for node in other._preorder():
            self.enqueue(node.value, node.priority)
        return self

    def copy(self) -> "PriorityQueue":
        return PriorityQueue().assign(self)

    def __copy__(self) -> "PriorityQueue":
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, PriorityQueue):
            return NotImplemented
        stack = [(self._root, other._root)]
        while stack:
            mine, theirs = stack.pop()
            if mine is None and theirs is None:
                continue
            if mine is None or theirs is None:
                return False
            a = self._nodes[mine]
            b = other._nodes[theirs]
            if a.priority != b.priority or a.value != b.value:
                return False
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
            stack.append((a.link, b.link))
        return True

    __hash__ = None

    def to_string(self) -> str:
        # "1 value: Ben\n2 value: Jen\n..." in traversal order
        lines = []
        for value, priority in self:
            lines.append(f"{priority} value: {value}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"PriorityQueue(size={self._size})"
