# treebench/main.py
import logging
import random
import sys
from argparse import ArgumentParser, ArgumentTypeError

from treebench.config import DEFAULT_SCALABILITY_SIZES, LOGGING_CONFIG, PLOT_PATH, load_settings
from treebench.core.benchmark import TreeBenchmark
from treebench.core.exceptions import ConfigurationError
from treebench.core.io.dataset_generator import DatasetGenerator
from treebench.core.reporting import format_scalability, plot_scalability, print_reports


def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ArgumentTypeError(f"não é um inteiro válido: {raw!r}") from None
    if value < 1:
        raise ArgumentTypeError(f"deve ser >= 1, recebido {value}")
    return value


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="treebench", description="Compara BST e AVL em datasets aleatórios.")
    parser.add_argument("--seed", type=int, default=None, help="Semente do gerador aleatório")
    parser.add_argument("--env-file", default=None, help="Arquivo .env com N e MAX_VALUE")
    parser.add_argument("--scalability", action="store_true", help="Executa também o teste de escalabilidade")
    parser.add_argument("--sizes", type=positive_int, nargs="+", default=DEFAULT_SCALABILITY_SIZES)
    parser.add_argument("--plot", default=None, nargs="?", const=PLOT_PATH,
                        help=f"Salva o gráfico de escalabilidade (padrão: {PLOT_PATH})")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(**LOGGING_CONFIG)

    try:
        settings = load_settings(env_file=args.env_file)
    except ConfigurationError as e:
        logging.error(f"Configuração inválida: {e}")
        return 1

    benchmark = TreeBenchmark(DatasetGenerator(random.Random(args.seed)))
    print_reports(benchmark.run(settings))

    if args.scalability or args.plot:
        points = benchmark.scalability(args.sizes, settings.max_value)
        print("\n".join(format_scalability(points)))
        if args.plot:
            path = plot_scalability(points, args.plot)
            print(f"\n>> Gráfico salvo em '{path}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
