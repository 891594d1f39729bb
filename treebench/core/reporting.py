import os
from typing import Iterable, List, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from treebench.core.benchmark import BuildReport, ScalabilityPoint, SearchReport

SEPARATOR = "-" * 33

ENGINE_NAMES = {
    "bst": "BST",
    "avl": "AVL",
}


def _engine_name(engine: str) -> str:
    return ENGINE_NAMES.get(engine, engine.upper())


def format_build_report(report: BuildReport) -> List[str]:
    lines = [
        SEPARATOR,
        f"Construindo árvore {_engine_name(report.engine)}, com nós {report.size}",
        f"Tempo decorrido: {report.elapsed * 1000:.3f} ms",
    ]
    if report.engine == "avl":
        lines.append(f"Rotações: {report.rotations}")
    lines.append(format_height(report))
    return lines


def format_search_report(report: SearchReport) -> List[str]:
    return [
        SEPARATOR,
        f"Buscando ({report.label}) em {_engine_name(report.engine)}: [{report.query}]",
        f"Tempo decorrido: {report.elapsed * 1_000_000:.1f} µs",
        f"Encontrado: {report.found}",
        f"Nº de leituras: {report.comparisons}",
    ]


def format_height(report: BuildReport) -> str:
    return f"Altura da árvore {_engine_name(report.engine)}: {report.height}"


def print_reports(reports: Iterable[Union[BuildReport, SearchReport]]):
    for report in reports:
        if isinstance(report, BuildReport):
            lines = format_build_report(report)
        else:
            lines = format_search_report(report)
        print("\n".join(lines))


def format_scalability(points: Sequence[ScalabilityPoint]) -> List[str]:
    lines = [f"{'N':>8} | {'alt. BST':>8} | {'alt. AVL':>8} | {'leit. BST':>9} | {'leit. AVL':>9}"]
    for p in points:
        lines.append(
            f"{p.size:8d} | {p.bst_height:8d} | {p.avl_height:8d} | "
            f"{p.bst_mean_comparisons:9.2f} | {p.avl_mean_comparisons:9.2f}"
        )
    return lines


def plot_scalability(points: Sequence[ScalabilityPoint], path: str) -> str:
    """
    Gera o gráfico comparativo (altura e leituras médias por N) e salva em `path`.
    Retorna o caminho salvo.
    """
    sizes = np.array([p.size for p in points])
    reference = np.ceil(np.log2(sizes + 1))

    fig = plt.figure(figsize=(12, 5))

    # Gráfico 1: Altura
    plt.subplot(1, 2, 1)
    plt.plot(sizes, [p.bst_height for p in points], marker='o', label='Altura BST')
    plt.plot(sizes, [p.avl_height for p in points], marker='x', label='Altura AVL')
    plt.plot(sizes, reference, 'r--', label='log2(n+1) Teórico')
    plt.xlabel('Número de Nós (N)')
    plt.ylabel('Altura')
    plt.title('Altura: BST vs AVL')
    plt.legend()
    plt.grid(True)

    # Gráfico 2: Leituras por busca
    plt.subplot(1, 2, 2)
    plt.plot(sizes, [p.bst_mean_comparisons for p in points], marker='o', label='Busca BST')
    plt.plot(sizes, [p.avl_mean_comparisons for p in points], marker='s', color='orange', label='Busca AVL')
    plt.xlabel('Número de Nós (N)')
    plt.ylabel('Leituras Médias')
    plt.title('Custo de Busca')
    plt.legend()
    plt.grid(True)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(path)
    plt.close(fig)
    return path
