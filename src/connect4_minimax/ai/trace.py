from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class SearchNode:
    parent: int  # -1 for the root
    move: Optional[int]
    depth: int  # distance from the root
    value: Optional[int] = None
    children: List[int] = field(default_factory=list)


class SearchTrace:
    """
    Arena of search nodes for one root search. Nodes reference each other by
    index so the whole tree is released together when the trace is dropped.
    """

    def __init__(self) -> None:
        self.nodes: List[SearchNode] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def add(self, parent: int, move: Optional[int], depth: int) -> int:
        idx = len(self.nodes)
        self.nodes.append(SearchNode(parent=parent, move=move, depth=depth))
        if parent >= 0:
            self.nodes[parent].children.append(idx)
        return idx

    def resolve(self, idx: int, value: int) -> None:
        self.nodes[idx].value = value

    @property
    def root(self) -> Optional[SearchNode]:
        return self.nodes[0] if self.nodes else None

    def children_of(self, idx: int) -> List[SearchNode]:
        return [self.nodes[i] for i in self.nodes[idx].children]

    def leaves(self) -> List[SearchNode]:
        return [n for n in self.nodes if not n.children]

    def max_depth(self) -> int:
        return max((n.depth for n in self.nodes), default=0)
