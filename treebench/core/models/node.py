from typing import List, Optional, Any


class TreeNode:
    """
    Nó de uma árvore binária de busca (BST ou AVL).
    Cada nó é dono exclusivo das suas subárvores esquerda e direita.
    """
    def __init__(self, value: Any):
        self.value = value
        self.left: Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None
        self.height = 1         # Cache usado apenas pela AVL

    def __repr__(self):
        return f"TreeNode({self.value})"


def height(node: Optional[TreeNode]) -> int:
    """
    Altura estrutural da subárvore (0 se ausente, 1 para folha).
    Recalculada a cada chamada, sem ler o cache da AVL.
    Usa pilha explícita para não estourar a recursão em BSTs degeneradas.
    """
    if node is None:
        return 0

    best = 0
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        if depth > best:
            best = depth
        if current.left is not None:
            stack.append((current.left, depth + 1))
        if current.right is not None:
            stack.append((current.right, depth + 1))
    return best


def in_order(node: Optional[TreeNode]) -> List[Any]:
    """Retorna os valores em ordem (in-order traversal), de forma iterativa."""
    values = []
    stack = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.value)
        current = current.right
    return values


def is_bst(node: Optional[TreeNode]) -> bool:
    """
    Verifica o invariante da BST: esquerda <= valor < direita.
    Cada nó é checado contra os limites herdados dos ancestrais.
    """
    stack = [(node, None, None)]
    while stack:
        current, low, high = stack.pop()
        if current is None:
            continue
        # low é exclusivo (veio de um ancestral à esquerda), high é inclusivo
        if low is not None and not current.value > low:
            return False
        if high is not None and not current.value <= high:
            return False
        stack.append((current.left, low, current.value))
        stack.append((current.right, current.value, high))
    return True


def is_balanced(node: Optional[TreeNode]) -> bool:
    """Verifica |altura(esq) - altura(dir)| <= 1 em todos os nós."""
    heights = {}
    stack = [(node, False)]
    while stack:
        current, visited = stack.pop()
        if current is None:
            continue
        if visited:
            left = heights.get(id(current.left), 0)
            right = heights.get(id(current.right), 0)
            if abs(left - right) > 1:
                return False
            heights[id(current)] = 1 + max(left, right)
        else:
            stack.append((current, True))
            stack.append((current.left, False))
            stack.append((current.right, False))
    return True
