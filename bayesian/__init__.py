from bayesian.classifier import Classifier
from bayesian.errors import BayesianError
from bayesian.errors import InvalidArgumentError
from bayesian.errors import InvalidStateError
from bayesian.store import BaseStore
from bayesian.store import HeapStore
from bayesian.store import MappingStore
from bayesian.store import SqliteStore


__all__ = [
    "BaseStore",
    "HeapStore",
    "MappingStore",
    "SqliteStore",
    "Classifier",
    "BayesianError",
    "InvalidArgumentError",
    "InvalidStateError",
]
