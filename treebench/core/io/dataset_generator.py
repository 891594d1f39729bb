"""
Gerador de datasets aleatórios para o benchmark.
O gerador de números é injetado, então os testes podem fixar a semente.
"""
import random
from typing import List, Optional, Sequence

from treebench.core.exceptions import EmptyDatasetError


class DatasetGenerator:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def generate(self, n: int, max_value: int) -> List[int]:
        """Gera n inteiros em [1, max_value)."""
        if n < 1:
            raise ValueError("O tamanho do dataset deve ser maior que zero.")
        if max_value < 2:
            raise ValueError("MAX_VALUE deve ser pelo menos 2.")
        return [self.rng.randrange(1, max_value) for _ in range(n)]

    def present_query(self, dataset: Sequence[int]) -> int:
        """Valor sorteado do próprio dataset (busca com sucesso garantido)."""
        if len(dataset) == 0:
            raise EmptyDatasetError()
        return dataset[self.rng.randrange(len(dataset))]

    def random_query(self, n: int) -> int:
        """
        Valor em [1, n). Não há garantia de que esteja ausente da árvore.
        Para n == 1 o intervalo seria vazio, então usamos [1, 2).
        """
        return self.rng.randrange(1, max(n, 2))
