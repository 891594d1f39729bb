import sys
import os
import random
import pytest
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from treebench.core.exceptions import EmptyDatasetError
from treebench.core.models.node import TreeNode, height, in_order, is_bst
from treebench.core.structures.bst import BinarySearchTree, build_tree, insert_node, search


def test_bst_example_dataset():
    print("--- Teste: BST com dataset de exemplo ---")
    root = build_tree([5, 3, 8, 3, 9, 1])

    assert in_order(root) == [1, 3, 3, 5, 8, 9], "In-order deve ser crescente e manter repetidos"
    assert root.value == 5, "O primeiro elemento deve ser a raiz"

    found, reads = search(8, root)
    assert found is True
    assert reads == 2
    assert reads <= 6

    found, reads = search(7, root)
    assert found is False
    assert reads == 2


def test_duplicates_go_left():
    root = TreeNode(5)
    insert_node(5, root)
    assert root.left is not None and root.left.value == 5
    assert root.right is None


def test_build_does_not_reinsert_root():
    root = build_tree([4, 2, 6])
    assert in_order(root) == [2, 4, 6]

    # Uma repetição explícita do primeiro valor é inserida normalmente
    root = build_tree([4, 2, 4])
    assert in_order(root) == [2, 4, 4]


def test_build_empty_dataset_raises():
    with pytest.raises(EmptyDatasetError):
        build_tree([])
    # Também é um ValueError
    with pytest.raises(ValueError):
        BinarySearchTree.from_dataset([])


def test_sorted_input_degenerates():
    root = build_tree([1, 2, 3, 4, 5, 6, 7])
    assert height(root) == 7, "BST sem balanceamento degenera com entrada ordenada"

    found, reads = search(7, root)
    assert found and reads == 7


def test_large_sorted_input_has_no_recursion_limit():
    n = 3000
    tree = BinarySearchTree.from_dataset(list(range(n)))
    assert tree.height() == n
    result = tree.search(n - 1)
    assert result.found is True
    assert result.comparisons == n


def test_search_empty_tree():
    result = search(1, None)
    assert result.found is False
    assert result.comparisons == 0


def test_search_properties_random():
    rng = random.Random(1234)
    for _ in range(50):
        dataset = [rng.randint(1, 200) for _ in range(rng.randint(1, 150))]
        root = build_tree(dataset)
        h = height(root)

        assert is_bst(root), "Invariante da BST violado"
        assert in_order(root) == sorted(dataset)

        for value in dataset:
            found, reads = search(value, root)
            assert found, f"Valor inserido {value} não encontrado"
            assert 1 <= reads <= h

        for value in (0, 201, 1000):
            found, reads = search(value, root)
            assert not found
            assert 1 <= reads <= h


def test_wrapper_incremental_insert():
    tree = BinarySearchTree()
    assert tree.height() == 0
    assert len(tree) == 0

    for v in [10, 5, 15, 5]:
        tree.insert(v)

    assert tree.root.value == 10
    assert len(tree) == 4
    assert tree.get_all_values() == [5, 5, 10, 15]
    assert 15 in tree
    assert 7 not in tree


if __name__ == "__main__":
    test_bst_example_dataset()
