from .bubble import BubbleSort
from .quick import QuickSort

# Closed set of selectable algorithms, in key order ("1", "2", ...).
ALGORITHM_TYPES = (BubbleSort, QuickSort)


class AlgorithmSlot:
    """
    One selectable algorithm plus its progress state.

    The state stays None until reset_with_data() is called; every query on an
    empty slot returns an empty result and step() reports completion.
    """

    def __init__(self, algorithm):
        self.algorithm = algorithm
        self.state     = None

    def name(self) -> str:
        return self.algorithm.name

    def is_ready(self) -> bool:
        return self.state is not None

    def reset_with_data(self, bars):
        self.state = self.algorithm.initial_state(bars)

    def step(self) -> bool:
        if self.state is None:
            return True
        return self.algorithm.step(self.state)

    def get_data(self) -> list:
        if self.state is None:
            return []
        return self.algorithm.get_data(self.state)

    def get_current_indices(self) -> list:
        if self.state is None:
            return []
        return self.algorithm.get_current_indices(self.state)

    def get_comparisons(self) -> list:
        if self.state is None:
            return []
        return self.algorithm.get_comparisons(self.state)

    def stats(self) -> dict:
        if self.state is None:
            return dict(steps=0, comparisons=0)
        return dict(steps=self.state.steps, comparisons=self.state.comparisons_made)


def make_algorithms() -> list:
    return [AlgorithmSlot(cls()) for cls in ALGORITHM_TYPES]
