from typing import Any, List, NamedTuple, Optional, Sequence

from treebench.core.exceptions import EmptyDatasetError
from treebench.core.models.node import TreeNode, height, in_order


class SearchResult(NamedTuple):
    found: bool
    comparisons: int        # Nós visitados durante a busca


def insert_node(value: Any, root: TreeNode) -> None:
    """
    Inserção normal de BST, sem rebalanceamento.
    Valores iguais vão para a esquerda (a árvore aceita repetições).
    Iterativa: entrada ordenada gera profundidade O(n).
    """
    current = root
    while True:
        if value <= current.value:
            if current.left is None:
                current.left = TreeNode(value)
                return
            current = current.left
        else:
            if current.right is None:
                current.right = TreeNode(value)
                return
            current = current.right


def search(value: Any, root: Optional[TreeNode]) -> SearchResult:
    """
    Busca contando uma leitura por nó visitado.
    Serve tanto para a BST quanto para a AVL (mesma ordenação).
    """
    comparisons = 0
    current = root
    while current is not None:
        comparisons += 1
        if value == current.value:
            return SearchResult(True, comparisons)
        elif value < current.value:
            current = current.left
        else:
            current = current.right
    return SearchResult(False, comparisons)


def build_tree(dataset: Sequence[Any]) -> TreeNode:
    """O primeiro elemento vira a raiz; o restante é inserido na ordem do dataset."""
    if len(dataset) == 0:
        raise EmptyDatasetError()

    root = TreeNode(dataset[0])
    for value in dataset[1:]:
        insert_node(value, root)
    return root


class BinarySearchTree:
    """
    Árvore binária de busca sem balanceamento.
    Pior caso (dados ordenados): altura O(n).
    """
    def __init__(self):
        self.root: Optional[TreeNode] = None
        self.size = 0
        self.rotations = 0      # Nunca rotaciona

    @classmethod
    def from_dataset(cls, dataset: Sequence[Any]) -> "BinarySearchTree":
        tree = cls()
        tree.root = build_tree(dataset)
        tree.size = len(dataset)
        return tree

    def insert(self, value: Any):
        if self.root is None:
            self.root = TreeNode(value)
        else:
            insert_node(value, self.root)
        self.size += 1

    def search(self, value: Any) -> SearchResult:
        return search(value, self.root)

    def height(self) -> int:
        return height(self.root)

    def get_all_values(self) -> List[Any]:
        return in_order(self.root)

    def __contains__(self, value: Any) -> bool:
        return self.search(value).found

    def __len__(self):
        return self.size
