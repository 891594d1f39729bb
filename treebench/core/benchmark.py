import logging
import time
from typing import List, NamedTuple, Sequence, Tuple, Union

import numpy as np

from treebench.config import SEARCH_SAMPLE_SIZE, Settings
from treebench.core.io.dataset_generator import DatasetGenerator
from treebench.core.structures.avl_tree import AVLTree
from treebench.core.structures.bst import BinarySearchTree

ENGINE_BST = "bst"
ENGINE_AVL = "avl"
ENGINES = {
    ENGINE_BST: BinarySearchTree,
    ENGINE_AVL: AVLTree,
}

Tree = Union[BinarySearchTree, AVLTree]


class BuildReport(NamedTuple):
    engine: str
    size: int
    elapsed: float      # segundos
    height: int
    rotations: int


class SearchReport(NamedTuple):
    engine: str
    label: str          # "presente" ou "aleatório"
    query: int
    found: bool
    comparisons: int
    elapsed: float


class ScalabilityPoint(NamedTuple):
    size: int
    bst_height: int
    avl_height: int
    bst_mean_comparisons: float
    avl_mean_comparisons: float
    bst_build_time: float
    avl_build_time: float


class TreeBenchmark:
    """
    Compara a BST sem balanceamento com a AVL no mesmo dataset.
    Devolve apenas valores; a formatação fica com o módulo de relatórios.
    """
    def __init__(self, generator: DatasetGenerator):
        self.generator = generator

    @staticmethod
    def _engine(engine: str):
        try:
            return ENGINES[engine]
        except KeyError:
            raise ValueError(f"Motor desconhecido: {engine!r} (use 'bst' ou 'avl')") from None

    def build(self, engine: str, dataset: Sequence[int]) -> Tuple[Tree, BuildReport]:
        tree_cls = self._engine(engine)
        logging.debug(f"Construindo árvore {engine.upper()} com {len(dataset)} nós")

        start = time.perf_counter()
        tree = tree_cls.from_dataset(dataset)
        elapsed = time.perf_counter() - start

        rotations = tree.rotations
        report = BuildReport(engine, len(dataset), elapsed, tree.height(), rotations)
        logging.debug(f"{engine.upper()} pronta em {elapsed * 1000:.3f} ms (altura {report.height})")
        return tree, report

    def search(self, engine: str, tree: Tree, query: int, label: str) -> SearchReport:
        start = time.perf_counter()
        result = tree.search(query)
        elapsed = time.perf_counter() - start
        return SearchReport(engine, label, query, result.found, result.comparisons, elapsed)

    def run(self, settings: Settings) -> List[Union[BuildReport, SearchReport]]:
        """
        Sessão completa: um dataset, as duas árvores, duas buscas em cada.
        A consulta "presente" sai do dataset; a "aleatória" sai de [1, N).
        """
        dataset = self.generator.generate(settings.n, settings.max_value)
        present = self.generator.present_query(dataset)
        random_value = self.generator.random_query(settings.n)

        reports: List[Union[BuildReport, SearchReport]] = []
        for engine in (ENGINE_BST, ENGINE_AVL):
            tree, build_report = self.build(engine, dataset)
            reports.append(build_report)
            reports.append(self.search(engine, tree, present, "presente"))
            reports.append(self.search(engine, tree, random_value, "aleatório"))
        return reports

    def scalability(self, sizes: Sequence[int], max_value: int,
                    samples: int = SEARCH_SAMPLE_SIZE) -> List[ScalabilityPoint]:
        """Mede altura, leituras médias e tempo de construção para cada N."""
        points = []
        for size in sizes:
            logging.info(f"Testando com N = {size} nós...")
            dataset = self.generator.generate(size, max_value)
            queries = [self.generator.present_query(dataset) for _ in range(samples)]

            bst, bst_report = self.build(ENGINE_BST, dataset)
            avl, avl_report = self.build(ENGINE_AVL, dataset)

            bst_reads = [bst.search(q).comparisons for q in queries]
            avl_reads = [avl.search(q).comparisons for q in queries]

            points.append(ScalabilityPoint(
                size=size,
                bst_height=bst_report.height,
                avl_height=avl_report.height,
                bst_mean_comparisons=float(np.mean(bst_reads)),
                avl_mean_comparisons=float(np.mean(avl_reads)),
                bst_build_time=bst_report.elapsed,
                avl_build_time=avl_report.elapsed,
            ))
        return points
