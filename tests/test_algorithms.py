from stepsort.algorithms import ALGORITHM_TYPES, AlgorithmSlot, make_algorithms
from stepsort.bubble import BubbleSort, BubbleSortState
from stepsort.quick import QuickSort, QuickSortState


def test_make_algorithms_order_and_names():
    slots = make_algorithms()
    assert [s.name() for s in slots] == ["Bubble Sort", "Quick Sort"]
    assert len(slots) == len(ALGORITHM_TYPES)
    assert all(not s.is_ready() for s in slots)


def test_empty_slot_is_a_safe_noop():
    slot = AlgorithmSlot(QuickSort())
    assert slot.step() is True
    assert slot.get_data() == []
    assert slot.get_current_indices() == []
    assert slot.get_comparisons() == []
    assert slot.stats() == dict(steps=0, comparisons=0)


def test_reset_builds_matching_state():
    bubble = AlgorithmSlot(BubbleSort())
    quick  = AlgorithmSlot(QuickSort())
    bubble.reset_with_data([2, 1])
    quick.reset_with_data([2, 1])
    assert isinstance(bubble.state, BubbleSortState)
    assert isinstance(quick.state, QuickSortState)
    assert bubble.get_data() == [2, 1]


def test_reset_discards_previous_progress():
    slot = AlgorithmSlot(BubbleSort())
    slot.reset_with_data([3, 2, 1])
    while not slot.step():
        pass
    assert slot.get_data() == [1, 2, 3]

    slot.reset_with_data([9, 8])
    assert slot.get_data() == [9, 8]
    assert slot.stats() == dict(steps=0, comparisons=0)
    assert slot.step() is False
    assert slot.get_comparisons() == [(0, 1)]


def test_slots_sort_the_same_input():
    data = [7, 3, 9, 1, 4, 4, 8]
    for slot in make_algorithms():
        slot.reset_with_data(data)
        while not slot.step():
            pass
        assert slot.get_data() == sorted(data)
        assert slot.stats()["comparisons"] > 0
    assert data == [7, 3, 9, 1, 4, 4, 8]
