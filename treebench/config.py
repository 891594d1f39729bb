# treebench/config.py
import os
from typing import Mapping, NamedTuple, Optional

from dotenv import find_dotenv, load_dotenv

from treebench.core.exceptions import ConfigurationError

# Logging configuration
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(levelname)s - %(message)s"
}

# Variáveis de ambiente lidas pelo benchmark
ENV_DATASET_SIZE = "N"
ENV_MAX_VALUE = "MAX_VALUE"

# Benchmark de escalabilidade
DEFAULT_SCALABILITY_SIZES = [100, 500, 1000, 2000, 5000]
SEARCH_SAMPLE_SIZE = 100
PLOT_PATH = "data/benchmark_results.png"


class Settings(NamedTuple):
    n: int              # Tamanho do dataset
    max_value: int      # Limite superior (exclusivo) dos valores gerados


def _read_int(environ: Mapping[str, str], name: str, minimum: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        raise ConfigurationError(name, "variável não definida")
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigurationError(name, f"não é um inteiro válido: {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(name, f"deve ser >= {minimum}, recebido {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  env_file: Optional[str] = None) -> Settings:
    """
    Lê N e MAX_VALUE do ambiente.
    Sem `environ` explícito, carrega antes o arquivo .env do diretório atual
    (ou `env_file`); o ambiente tem prioridade.
    """
    if environ is None:
        load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True), override=False)
        environ = os.environ

    n = _read_int(environ, ENV_DATASET_SIZE, minimum=1)
    # [1, MAX_VALUE) precisa ter pelo menos um valor
    max_value = _read_int(environ, ENV_MAX_VALUE, minimum=2)
    return Settings(n, max_value)
