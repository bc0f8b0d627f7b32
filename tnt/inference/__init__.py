from .equality import successor, predecessor, symmetry, transitivity
from .quantifier import specification, generalization, existence, interchange_ea, interchange_ae
from .induction import induction

__all__ = [
    "successor", "predecessor", "symmetry", "transitivity",
    "specification", "generalization", "existence",
    "interchange_ea", "interchange_ae",
    "induction",
]
