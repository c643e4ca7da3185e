from typing import Any, Generic, Iterator, Optional, Tuple, TypeVar

V = TypeVar('V')


class _Node:
    __slots__ = ('key', 'value', 'left', 'right', 'height')

    def __init__(self, key: str, value: Any, left: Optional['_Node'], right: Optional['_Node']):
        self.key = key
        self.value = value
        self.left = left
        self.right = right
        self.height = 1 + max(_height(left), _height(right))


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    return _Node(pivot.key, pivot.value, pivot.left,
                 _Node(node.key, node.value, pivot.right, node.right))


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    return _Node(pivot.key, pivot.value,
                 _Node(node.key, node.value, node.left, pivot.left), pivot.right)


def _balance(key: str, value: Any, left: Optional[_Node], right: Optional[_Node]) -> _Node:
    diff = _height(left) - _height(right)
    if diff > 1:
        if _height(left.left) < _height(left.right):
            left = _rotate_left(left)
        return _rotate_right(_Node(key, value, left, right))
    if diff < -1:
        if _height(right.right) < _height(right.left):
            right = _rotate_right(right)
        return _rotate_left(_Node(key, value, left, right))
    return _Node(key, value, left, right)


def _insert(node: Optional[_Node], key: str, value: Any) -> _Node:
    # Copies the nodes on the search path only; everything else is shared.
    if node is None:
        return _Node(key, value, None, None)
    if key < node.key:
        return _balance(node.key, node.value, _insert(node.left, key, value), node.right)
    if key > node.key:
        return _balance(node.key, node.value, node.left, _insert(node.right, key, value))
    return _Node(key, value, node.left, node.right)


class Environment(Generic[V]):
    """Persistent mapping from identifiers to types or values.

    `insert` never modifies the receiver: it returns a new environment that
    shares all untouched subtrees with the old one. Any closure or context
    holding an earlier environment keeps seeing exactly the bindings it
    captured. Inserting an existing name shadows it in the new version only.
    """
    __slots__ = ('_root', '_size')

    def __init__(self, _root: Optional[_Node] = None, _size: int = 0):
        self._root = _root
        self._size = _size

    def get(self, name: str) -> Optional[V]:
        node = self._root
        while node is not None:
            if name < node.key:
                node = node.left
            elif name > node.key:
                node = node.right
            else:
                return node.value
        return None

    def insert(self, name: str, value: V) -> 'Environment[V]':
        size = self._size if name in self else self._size + 1
        return Environment(_insert(self._root, name, value), size)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        node = self._root
        while node is not None:
            if name < node.key:
                node = node.left
            elif name > node.key:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[Tuple[str, V]]:
        """Yield (name, binding) pairs in name order."""
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def __iter__(self) -> Iterator[str]:
        for name, _ in self.items():
            yield name

    def __repr__(self) -> str:
        inner = ', '.join(f"{k}: {v!r}" for k, v in self.items())
        return f"Environment({{{inner}}})"


TypeEnv = Environment
ValueEnv = Environment
