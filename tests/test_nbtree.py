import pytest

from civitree.nbtree import NonBinaryTree, create_sample_tree, max_info


def build_chain(letters):
    tree = NonBinaryTree(len(letters))
    last = len(letters)
    for position, letter in enumerate(letters, start=1):
        tree.set_node(
            position,
            letter,
            position + 1 if position < last else None,
            None,
            position - 1 if position > 1 else None,
        )
    return tree


def build_star(root, children):
    tree = NonBinaryTree(len(children) + 1)
    tree.set_node(1, root, 2, None, None)
    last = len(children) + 1
    for index, letter in enumerate(children, start=2):
        tree.set_node(index, letter, None, index + 1 if index < last else None, 1)
    return tree


def test_sample_preorder():
    assert "".join(create_sample_tree().preorder()) == "ABDEIJCFGH"


def test_sample_inorder():
    assert "".join(create_sample_tree().inorder()) == "DBIEJAFCGH"


def test_sample_postorder():
    assert "".join(create_sample_tree().postorder()) == "DIJEBFGHCA"


def test_sample_level_order_follows_slot_order():
    tree = create_sample_tree()
    order = tree.level_order()
    assert order == sorted(order)
    assert len(order) == tree.count()


def test_traversals_visit_every_node_once():
    tree = create_sample_tree()
    expected = sorted(tree.level_order())
    assert sorted(tree.preorder()) == expected
    assert sorted(tree.inorder()) == expected
    assert sorted(tree.postorder()) == expected


def test_sample_root():
    tree = create_sample_tree()
    assert tree.root() == 1
    assert tree.preorder()[0] == tree.postorder()[-1]
    assert tree.is_empty() is False


def test_sample_depth_matches_deepest_level():
    tree = create_sample_tree()
    assert tree.depth() == max(tree.level(info) for info in tree.preorder())


def test_sample_search():
    tree = create_sample_tree()
    assert tree.search("E") is True
    assert tree.search("Z") is False


def test_level_of_root_and_missing():
    tree = create_sample_tree()
    assert tree.level("A") == 0
    assert tree.level("Z") == 0


def test_empty_tree():
    tree = NonBinaryTree()
    assert tree.root() is None
    assert tree.is_empty() is True
    assert tree.preorder() == []
    assert tree.inorder() == []
    assert tree.postorder() == []
    assert tree.level_order() == []
    assert tree.depth() == 0
    assert tree.level("A") == 0
    assert tree.count() == 0
    assert tree.leaf_count() == 0
    assert tree.describe() == ""


def test_chain():
    letters = "PQRS"
    tree = build_chain(letters)
    assert tree.depth() == len(letters) - 1
    assert tree.leaf_count() == 1
    assert tree.preorder() == list(letters)
    assert tree.postorder() == list(reversed(letters))
    assert tree.inorder() == list(reversed(letters))
    for position, letter in enumerate(letters):
        assert tree.level(letter) == position


def test_star():
    children = "abc"
    tree = build_star("X", children)
    assert tree.leaf_count() == len(children)
    assert tree.depth() == 1
    assert tree.inorder() == ["a", "X", "b", "c"]
    assert tree.level_order() == ["X", "a", "b", "c"]
    assert tree.count() == len(children) + 1


def test_lone_root_has_depth_zero():
    tree = NonBinaryTree(1)
    tree.set_node(1, "R")
    assert tree.depth() == 0
    assert tree.leaf_count() == 1
    assert tree.preorder() == ["R"]


def test_clearing_root_empties_tree():
    tree = create_sample_tree()
    before = tree.count()
    tree.set_node(1, "", None, None, None)
    assert tree.count() == before - 1
    assert tree.is_empty() is True
    assert tree.preorder() == []


def test_describe_lists_occupied_slots():
    tree = create_sample_tree()
    text = tree.describe()
    assert text.count("--> Indeks ke-") == tree.count()
    assert "info array ke 1         : A\n" in text
    assert "parent array ke 1       : -1\n" in text


def test_describe_skips_free_slots():
    tree = NonBinaryTree(3)
    tree.set_node(2, "K")
    text = tree.describe()
    assert text.startswith("--> Indeks ke-2\n")
    assert "Indeks ke-1" not in text
    assert "first son array ke 2    : -1\n" in text


@pytest.mark.parametrize(
    "first, second, expected",
    [("B", "J", "J"), ("z", "a", "z"), ("Q", "Q", "Q")],
)
def test_max_info(first, second, expected):
    assert max_info(first, second) == expected


@pytest.mark.parametrize("index", [0, 11, -1])
def test_set_node_rejects_bad_index(index):
    with pytest.raises(IndexError):
        NonBinaryTree(10).set_node(index, "A")


def test_set_node_rejects_bad_link():
    tree = NonBinaryTree(10)
    with pytest.raises(ValueError):
        tree.set_node(1, "A", 11, None, None)
    with pytest.raises(ValueError):
        tree.set_node(1, "A", None, 0, None)
    with pytest.raises(ValueError):
        tree.set_node(1, "A", None, None, 42)


def test_set_node_rejects_long_info():
    with pytest.raises(ValueError):
        NonBinaryTree(10).set_node(1, "AB")


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        NonBinaryTree(0)