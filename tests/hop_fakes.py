"""In-memory stand-ins for the tree provider, view, renderer, and input surface."""

from __future__ import annotations


class FakeNode:
    def __init__(
        self,
        node_type: str,
        start: int,
        end: int,
        *,
        field: str | None = None,
        children: list["FakeNode"] | None = None,
        named: bool = True,
    ) -> None:
        self.type = node_type
        self.start = start
        self.end = end
        self.field = field
        self.named = named
        self.children = children or []
        self.parent: FakeNode | None = None
        for child in self.children:
            child.parent = self

    def __repr__(self) -> str:
        return f"FakeNode({self.type!r}, {self.start}, {self.end})"


def leaf(node_type: str, start: int, end: int, field: str | None = "name", *, named: bool = True) -> FakeNode:
    return FakeNode(node_type, start, end, field=field, named=named)


def branch(node_type: str, start: int, end: int, children: list[FakeNode], field: str | None = None) -> FakeNode:
    return FakeNode(node_type, start, end, field=field, children=children)


class FakeTree:
    def __init__(self, root: FakeNode) -> None:
        self._root = root

    def root(self) -> FakeNode:
        return self._root

    def children(self, node: FakeNode, named_only: bool = False) -> list[FakeNode]:
        return [child for child in node.children if child.named or not named_only]

    def parent(self, node: FakeNode) -> FakeNode | None:
        return node.parent

    def start(self, node: FakeNode) -> int:
        return node.start

    def end(self, node: FakeNode) -> int:
        return node.end

    def field_name(self, node: FakeNode) -> str | None:
        return node.field

    def node_type(self, node: FakeNode) -> str:
        return node.type

    def text(self, node: FakeNode) -> str:
        return node.type


class FakeView:
    def __init__(self, start: int = 0, end: int = 1000, *, max_shift: int = 0) -> None:
        self.start = start
        self.end = end
        self.shift = 0
        self.max_shift = max_shift
        self.cursor: int | None = None
        self.moves: list[int] = []

    def visible_range(self) -> tuple[int, int]:
        return self.start + self.shift, self.end + self.shift

    def move_cursor(self, offset: int) -> None:
        self.cursor = offset
        self.moves.append(offset)

    def scroll(self, delta: int) -> bool:
        shifted = min(max(0, self.shift + delta), self.max_shift)
        if shifted == self.shift:
            return False
        self.shift = shifted
        return True

    def page_rows(self) -> int:
        return 10


class FakeRenderer:
    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.drawn: list[tuple] = []

    def clear_all(self) -> None:
        self.events.append(("clear",))
        self.drawn = []

    def draw(self, node, label: str, color) -> int:
        self.events.append(("draw", node, label))
        self.drawn.append((node, label, color))
        return len(self.events)


class FakeSurface:
    def __init__(self) -> None:
        self.installed: list = []

    @property
    def table(self):
        return self.installed[-1] if self.installed else None

    def install(self, table) -> None:
        self.installed.append(table)


def sample_tree() -> tuple[FakeTree, dict[str, FakeNode]]:
    """Two statements: ``alpha = beta(gamma)`` and ``delta``.

    Layout (offsets)::

        module 0..100
          stmt 10..40
            assign 10..40
              alpha 10..15  (field left)
              call 18..40   (field right)
                beta 18..22 (field function)
                args 22..40 (field arguments)
                  gamma 23..28 (no field)
          delta 50..55 (field value)
    """
    alpha = leaf("identifier", 10, 15, "left")
    beta = leaf("identifier", 18, 22, "function")
    gamma = leaf("identifier", 23, 28, None)
    args = branch("argument_list", 22, 40, [gamma], "arguments")
    call = branch("call", 18, 40, [beta, args], "right")
    assign = branch("assignment", 10, 40, [alpha, call])
    stmt = branch("expression_statement", 10, 40, [assign])
    delta = leaf("identifier", 50, 55, "value")
    module = branch("module", 0, 100, [stmt, delta])
    nodes = {
        "module": module,
        "stmt": stmt,
        "assign": assign,
        "alpha": alpha,
        "call": call,
        "beta": beta,
        "args": args,
        "gamma": gamma,
        "delta": delta,
    }
    return FakeTree(module), nodes
