from dataclasses import dataclass, field

# ============================================================
# Quick sort (Lomuto, last element as pivot) as a step machine
# ============================================================
#
# The recursive form
#
#     quick(lo, hi):
#         if lo >= hi: return
#         p = partition(lo, hi)
#         quick(lo, p-1); quick(p+1, hi)
#
# is replaced by an explicit list of QuickSortCall frames. Each frame is one
# pending quick(lo, hi) call, and carries its own partition cursors so the
# partition loop can stop after any single comparison and resume on the next
# step() call.
#
# One step() does exactly one of:
#   - announce the pivot of a fresh frame (no comparison)
#   - compare bars[partition_j] with the pivot, swapping if smaller
#   - place the pivot and push the two sub-ranges
#   - mark the run complete once the stack is empty
# Frames with low >= high are dropped inside the same call.


@dataclass
class QuickSortCall:
    low:          int
    high:         int
    pivot_index:  int | None = None
    partition_i:  int  = 0
    partition_j:  int  = 0
    partitioning: bool = False
    pivot_placed: bool = False


@dataclass
class QuickSortState:
    bars:             list
    call_stack:       list = field(default_factory=list)
    complete:         bool = False
    current_indices:  list = field(default_factory=list)
    comparisons:      list = field(default_factory=list)
    pivot_index:      int | None = None
    steps:            int  = 0
    comparisons_made: int  = 0


class QuickSort:
    name = "Quick Sort"

    def initial_state(self, bars) -> QuickSortState:
        state = QuickSortState(bars=list(bars))
        if len(state.bars) > 1:
            state.call_stack.append(QuickSortCall(low=0, high=len(state.bars) - 1))
        else:
            state.complete = True
        return state

    def _finish(self, state: QuickSortState) -> bool:
        state.complete = True
        state.current_indices.clear()
        state.comparisons.clear()
        state.pivot_index = None
        return True

    def step(self, state: QuickSortState) -> bool:
        while True:
            if state.complete or not state.call_stack:
                return self._finish(state)
            state.current_indices.clear()
            state.comparisons.clear()
            call = state.call_stack.pop()
            if call.low < call.high:
                break

        state.steps += 1

        if not call.partitioning:
            call.partitioning = True
            call.pivot_index  = call.high
            call.partition_i  = call.low
            call.partition_j  = call.low
            state.pivot_index = call.pivot_index
            state.current_indices.append(call.high)
            state.call_stack.append(call)
            return False

        bars  = state.bars
        pivot = call.pivot_index

        if call.partition_j < call.high:
            pi, pj = call.partition_i, call.partition_j
            state.comparisons.append((pj, pivot))
            state.comparisons_made += 1
            state.current_indices.extend((pj, pivot, pi))
            if bars[pj] < bars[pivot]:
                bars[pi], bars[pj] = bars[pj], bars[pi]
                call.partition_i += 1
            call.partition_j += 1
            state.call_stack.append(call)
            return False

        # partition_j reached high: pivot goes to its final slot
        p = call.partition_i
        bars[p], bars[pivot] = bars[pivot], bars[p]
        call.pivot_placed = True
        if p > call.low:
            state.call_stack.append(QuickSortCall(low=call.low, high=p - 1))
        if p < call.high:
            state.call_stack.append(QuickSortCall(low=p + 1, high=call.high))
        state.pivot_index = p
        state.current_indices.append(p)
        return False

    def get_data(self, state: QuickSortState) -> list:
        return list(state.bars)

    def get_comparisons(self, state: QuickSortState) -> list:
        return list(state.comparisons)

    def get_current_indices(self, state: QuickSortState) -> list:
        """Indices touched by the last step, plus the live pivot if not among them."""
        indices = list(state.current_indices)
        if state.pivot_index is not None and state.pivot_index not in indices:
            indices.append(state.pivot_index)
        return indices
