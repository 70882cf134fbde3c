"""Algorithm-level input errors."""

from graph.errors import EngineError


class MissingTarget(EngineError):
    """A target-seeking algorithm (A*) was run without a target node."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"Algorithm '{algorithm}' requires a target node")


class UnknownAlgorithm(EngineError):
    """The requested algorithm tag is not in the registry."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown algorithm: {key}")
