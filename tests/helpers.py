"""Tree factories shared by the test modules."""

from ptree import StringItem, TreeBuilder


def abcde() -> StringItem:
    """A(B, C(D, E))"""
    return (
        TreeBuilder("A")
        .add_empty_child("B")
        .begin_child("C")
        .add_empty_child("D")
        .add_empty_child("E")
        .end_child()
        .build()
    )


def flat(n: int, root: str = "R") -> StringItem:
    builder = TreeBuilder(root)
    for i in range(n):
        builder.add_empty_child(f"c{i}")
    return builder.build()


def chain(depth: int) -> StringItem:
    """n0 -> n1 -> ... -> n{depth}, one child per level."""
    builder = TreeBuilder("n0")
    for i in range(1, depth + 1):
        builder.begin_child(f"n{i}")
    for _ in range(depth):
        builder.end_child()
    return builder.build()
