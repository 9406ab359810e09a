from .classifier import HeuristicClassifier, LineClassifier, StrictClassifier
from .exceptions import UnknownClassifierError

DEFAULT_CLASSIFIER = "heuristic"

_CLASSIFIERS: dict[str, type[LineClassifier]] = {
    "heuristic": HeuristicClassifier,
    "strict": StrictClassifier,
}


def classifier_names() -> list[str]:
    return list(_CLASSIFIERS)


def get_classifier(name: str = DEFAULT_CLASSIFIER) -> LineClassifier:
    """Return an instantiated classifier registered under *name*.

    Raises UnknownClassifierError if no classifier has that name.
    """
    try:
        return _CLASSIFIERS[name]()
    except KeyError:
        raise UnknownClassifierError(name) from None
