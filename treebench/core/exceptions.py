class TreeBenchError(Exception):
    """Erro base do treebench."""


class ConfigurationError(TreeBenchError):
    """Configuração ausente ou inválida (N, MAX_VALUE)."""

    def __init__(self, variable: str, message: str):
        self.variable = variable
        super().__init__(f"{variable}: {message}")


class EmptyDatasetError(TreeBenchError, ValueError):
    """Tentativa de construir uma árvore a partir de um dataset vazio."""

    def __init__(self, message: str = "O dataset deve conter pelo menos um elemento."):
        super().__init__(message)
