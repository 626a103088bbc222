import random

import pytest

from priorityqueue import PriorityQueue


def make_queue(pairs):
    pq = PriorityQueue()
    for value, priority in pairs:
        pq.enqueue(value, priority)
    return pq


def drain(pq):
    out = []
    while pq.size() > 0:
        out.append(pq.dequeue())
    return out


def traverse(pq):
    out = []
    pq.begin()
    while True:
        item = pq.next()
        if item is None:
            return out
        out.append(item)


def test_empty_queue_defaults():
    pq = PriorityQueue()
    assert pq.size() == 0
    assert len(pq) == 0
    assert pq.empty()
    assert pq.dequeue() is None
    assert pq.peek() is None
    assert pq.dequeue(default="none") == "none"
    assert pq.root_index() is None
    pq.begin()
    assert pq.next() is None


def test_size_counts_duplicates():
    pq = make_queue([("a", 2), ("b", 2), ("c", 1), ("d", 2), ("e", 9)])
    assert pq.size() == 5
    assert pq.live_nodes() == 5


def test_ties_come_out_in_arrival_order():
    pq = make_queue([("a", 1), ("b", 1), ("c", 2)])
    assert pq.dequeue() == "a"
    assert pq.dequeue() == "b"
    # merged node with the same priority as c goes behind it
    pq.enqueue("ab", 2)
    assert pq.dequeue() == "c"
    assert pq.dequeue() == "ab"
    assert pq.size() == 0


def test_peek_does_not_remove():
    pq = make_queue([("x", 4), ("y", 2), ("z", 2)])
    assert pq.peek() == "y"
    assert pq.peek() == "y"
    assert pq.size() == 3


def test_dequeue_root_with_duplicate_chain():
    pq = make_queue([("x", 5), ("y", 5), ("z", 7), ("w", 3)])
    old_root = pq.root_index()
    assert pq.dequeue() == "w"  # leaf under the root
    assert pq.dequeue() == "x"  # root, chain head takes its place
    assert pq.root_index() != old_root
    assert traverse(pq) == [("y", 5), ("z", 7)]
    assert pq.dequeue() == "y"  # root without chain, right child promoted
    assert traverse(pq) == [("z", 7)]
    assert pq.dequeue() == "z"
    assert pq.root_index() is None
    assert pq.live_nodes() == 0


def test_dequeue_internal_node_with_right_subtree():
    pq = make_queue([(10, 10), (5, 5), (7, 7), (6, 6), (8, 8)])
    assert pq.dequeue() == 5
    assert traverse(pq) == [(6, 6), (7, 7), (8, 8), (10, 10)]
    assert pq.dequeue() == 6
    assert pq.dequeue() == 7
    assert traverse(pq) == [(8, 8), (10, 10)]
    assert drain(pq) == [8, 10]


def test_dequeue_chain_head_keeps_children_reachable():
    pq = make_queue([("r", 10), ("m", 4), ("m2", 4), ("m3", 4), ("n", 6), ("o", 12)])
    assert pq.dequeue() == "m"
    assert traverse(pq) == [("m2", 4), ("m3", 4), ("n", 6), ("r", 10), ("o", 12)]
    assert pq.dequeue() == "m2"
    assert pq.dequeue() == "m3"
    assert traverse(pq) == [("n", 6), ("r", 10), ("o", 12)]


def test_traversal_groups_duplicates_after_primary():
    pairs = [("a", 5), ("b", 3), ("c", 8), ("d", 3), ("e", 1), ("f", 9), ("g", 8), ("h", 5), ("i", 4)]
    pq = make_queue(pairs)
    expected = [(v, p) for v, p in sorted(pairs, key=lambda vp: vp[1])]
    assert traverse(pq) == expected
    assert list(pq) == expected


def test_next_after_exhaustion_stays_exhausted():
    pq = make_queue([("only", 1)])
    pq.begin()
    assert pq.next() == ("only", 1)
    assert pq.next() is None
    assert pq.next() is None


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_sequences_drain_in_stable_order(seed):
    rng = random.Random(seed)
    pairs = [(i, rng.randrange(0, 12)) for i in range(300)]
    pq = make_queue(pairs)
    expected = sorted(pairs, key=lambda vp: vp[1])

    assert pq.size() == len(pairs)
    assert traverse(pq) == expected
    assert len(traverse(pq)) == pq.size()

    drained = drain(pq)
    assert drained == [v for v, _ in expected]
    assert pq.live_nodes() == 0


def test_interleaved_enqueue_dequeue_matches_reference():
    rng = random.Random(42)
    pq = PriorityQueue()
    reference = []  # (priority, seq, value)
    seq = 0
    for _ in range(2000):
        if reference and rng.random() < 0.45:
            reference.sort()
            _, _, expected = reference.pop(0)
            assert pq.dequeue() == expected
        else:
            priority = rng.randrange(0, 20)
            pq.enqueue(seq, priority)
            reference.append((priority, seq, seq))
            seq += 1
        assert pq.size() == len(reference)
        assert pq.live_nodes() == len(reference)


def test_copy_is_equal_and_independent():
    pq = make_queue([("a", 5), ("b", 3), ("c", 5), ("d", 9), ("e", 1), ("f", 3)])
    dup = pq.copy()
    assert dup == pq
    assert dup is not pq

    dup.dequeue()
    dup.enqueue("z", 4)
    assert dup != pq
    assert traverse(pq) == [("e", 1), ("b", 3), ("f", 3), ("a", 5), ("c", 5), ("d", 9)]


def test_assign_replaces_contents():
    src = make_queue([("a", 2), ("b", 2), ("c", 1)])
    dst = make_queue([("old", 7), ("older", 8)])
    dst.assign(src)
    assert dst == src
    assert dst.size() == 3
    assert dst.assign(dst) is dst


def test_equality_depends_on_shape():
    assert make_queue([("a", 1), ("b", 2)]) != make_queue([("b", 2), ("a", 1)])
    assert make_queue([("a", 1), ("b", 1)]) != make_queue([("b", 1), ("a", 1)])
    assert make_queue([]) == PriorityQueue()
    assert make_queue([("a", 1)]) != make_queue([])


def test_clear_resets_to_fresh_state():
    pq = make_queue([("a", 4), ("b", 2), ("c", 4), ("d", 6), ("e", 2)])
    pq.clear()
    assert pq.size() == 0
    assert pq.live_nodes() == 0
    assert pq == PriorityQueue()
    assert pq.dequeue() is None

    pq.enqueue("x", 3)
    pq.enqueue("y", 1)
    assert drain(pq) == ["y", "x"]


def test_released_slots_are_reused():
    pq = make_queue([("a", 1), ("b", 2)])
    pq.dequeue()
    pq.enqueue("c", 3)
    assert len(pq._nodes) == 2
    assert pq.live_nodes() == 2


def test_double_release_is_rejected():
    pq = make_queue([("a", 1)])
    idx = pq.root_index()
    pq.dequeue()
    with pytest.raises(RuntimeError):
        pq._release(idx)


def test_to_string_lists_elements_in_order():
    pq = make_queue([("Gwen", 3), ("Jen", 2), ("Ben", 1), ("Sven", 2)])
    assert pq.to_string() == "1 value: Ben\n2 value: Jen\n2 value: Sven\n3 value: Gwen\n"
    assert str(pq) == pq.to_string()
    assert PriorityQueue().to_string() == ""
