from .algorithms import ALGORITHM_TYPES, AlgorithmSlot, make_algorithms
from .bubble import BubbleSort, BubbleSortState
from .quick import QuickSort, QuickSortCall, QuickSortState

__all__ = [
    "ALGORITHM_TYPES",
    "AlgorithmSlot",
    "make_algorithms",
    "BubbleSort",
    "BubbleSortState",
    "QuickSort",
    "QuickSortCall",
    "QuickSortState",
]
