import logging
from typing import Any, Callable, List, Optional, Sequence

from treebench.core.exceptions import EmptyDatasetError
from treebench.core.models.node import TreeNode, height, in_order
from treebench.core.structures.bst import SearchResult, search

# Caso de desbalanceamento que disparou a rotação: "LL", "LR", "RR" ou "RL"
RotationHook = Callable[[str], None]

# Número de rotações simples por caso
ROTATIONS_PER_CASE = {"LL": 1, "RR": 1, "LR": 2, "RL": 2}


def _get_height(node: Optional[TreeNode]) -> int:
    if not node:
        return 0
    return node.height


def _update_height(node: TreeNode):
    node.height = 1 + max(_get_height(node.left), _get_height(node.right))


def _get_balance(node: Optional[TreeNode]) -> int:
    if not node:
        return 0
    return _get_height(node.left) - _get_height(node.right)


def left_rotate(x: Optional[TreeNode]) -> Optional[TreeNode]:
    """
    Rotação simples à esquerda: promove o filho direito.
    Sem filho direito, devolve o próprio nó (nada a fazer).
    Retorna a nova raiz da subárvore.
    """
    if x is None or x.right is None:
        return x
    y = x.right
    x.right = y.left
    y.left = x

    _update_height(x)
    _update_height(y)
    return y


def right_rotate(y: Optional[TreeNode]) -> Optional[TreeNode]:
    """
    Rotação simples à direita: promove o filho esquerdo.
    Sem filho esquerdo, devolve o próprio nó.
    """
    if y is None or y.left is None:
        return y
    x = y.left
    y.left = x.right
    x.right = y

    _update_height(y)
    _update_height(x)
    return x


def insert_avl_node(value: Any, node: Optional[TreeNode],
                    on_rotate: Optional[RotationHook] = None) -> TreeNode:
    """
    Insere um valor e rebalanceia a subárvore na volta da recursão.
    Retorna a nova raiz da subárvore.
    """
    # 1. Inserção normal de BST (iguais vão para a esquerda)
    if not node:
        return TreeNode(value)

    if value <= node.value:
        node.left = insert_avl_node(value, node.left, on_rotate)
    else:
        node.right = insert_avl_node(value, node.right, on_rotate)

    # 2. Atualizar altura do nó ancestral
    _update_height(node)

    # 3. Fator de balanceamento
    balance = _get_balance(node)

    # 4. Rotações. Depois de uma rotação a subárvore volta à altura de antes
    # da inserção, então os ancestrais acima não rotacionam de novo.
    if balance > 1:
        if value <= node.left.value:
            case = "LL"
        else:
            case = "LR"
            node.left = left_rotate(node.left)
        node = right_rotate(node)
    elif balance < -1:
        if value > node.right.value:
            case = "RR"
        else:
            case = "RL"
            node.right = right_rotate(node.right)
        node = left_rotate(node)
    else:
        return node

    if on_rotate is not None:
        on_rotate(case)
    return node


def build_avl_tree(dataset: Sequence[Any],
                   on_rotate: Optional[RotationHook] = None) -> TreeNode:
    """O primeiro elemento semeia a raiz; o restante é inserido com rebalanceamento."""
    if len(dataset) == 0:
        raise EmptyDatasetError()

    root = TreeNode(dataset[0])
    for value in dataset[1:]:
        root = insert_avl_node(value, root, on_rotate)
    return root


class AVLTree:
    """
    Árvore AVL: BST auto-balanceada por rotações após cada inserção.
    Garante altura O(log n) e, portanto, busca em O(log n).
    """
    def __init__(self):
        self.root: Optional[TreeNode] = None
        self.size = 0
        self.rotations = 0      # Rotações simples (uma dupla conta como duas)

    @classmethod
    def from_dataset(cls, dataset: Sequence[Any]) -> "AVLTree":
        tree = cls()
        tree.root = build_avl_tree(dataset, tree._count_rotation)
        tree.size = len(dataset)
        return tree

    def _count_rotation(self, case: str):
        self.rotations += ROTATIONS_PER_CASE[case]
        logging.debug(f"Rotação {case} (total: {self.rotations})")

    def insert(self, value: Any):
        """Insere um novo valor e rebalanceia a árvore automaticamente."""
        self.root = insert_avl_node(value, self.root, self._count_rotation)
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
