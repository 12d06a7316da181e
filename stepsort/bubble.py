from dataclasses import dataclass, field


@dataclass
class BubbleSortState:
    """
    Progress of one bubble sort run.

    Attributes
    ----------
    bars            : list[int]  — working array, mutated in place
    i               : int        — completed outer passes
    j               : int        — inner cursor within the current pass
    complete        : bool       — set once, never cleared
    comparisons     : list       — pair compared by the last step
    current_indices : list       — indices touched by the last step
    """
    bars:             list
    i:                int  = 0
    j:                int  = 0
    complete:         bool = False
    comparisons:      list = field(default_factory=list)
    current_indices:  list = field(default_factory=list)
    steps:            int  = 0
    comparisons_made: int  = 0


class BubbleSort:
    name = "Bubble Sort"

    def initial_state(self, bars) -> BubbleSortState:
        state = BubbleSortState(bars=list(bars))
        state.complete = len(state.bars) <= 1
        return state

    def step(self, state: BubbleSortState) -> bool:
        if state.complete:
            return True

        n = len(state.bars)
        if n <= 1:
            state.complete = True
            return True

        state.comparisons.clear()
        state.current_indices.clear()
        state.steps += 1

        j = state.j
        if j < n - state.i - 1:
            state.current_indices = [j, j + 1]
            state.comparisons.append((j, j + 1))
            state.comparisons_made += 1
            if state.bars[j] > state.bars[j + 1]:
                state.bars[j], state.bars[j + 1] = state.bars[j + 1], state.bars[j]
            state.j += 1
        else:
            # pass rollover
            state.i += 1
            state.j  = 0
            if state.i >= n - 1:
                state.complete = True
                state.current_indices.clear()
                state.comparisons.clear()

        return state.complete

    def get_data(self, state: BubbleSortState) -> list:
        return list(state.bars)

    def get_comparisons(self, state: BubbleSortState) -> list:
        return list(state.comparisons)

    def get_current_indices(self, state: BubbleSortState) -> list:
        return list(state.current_indices)
