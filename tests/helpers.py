from prefixtrie import Trie


def assert_has_children(root: Trie, search: str, children: str) -> None:
    """The node at ``search`` must have exactly the characters in ``children``."""
    node = root.find_node(search)
    assert node is not None, f"could not find {search!r} in trie"
    assert set(node.children) == set(children)
    assert len(node.children) == len(children)


def assert_same_strings(actual, expected) -> None:
    assert sorted(actual) == sorted(expected)
