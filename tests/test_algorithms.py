from untangle.algorithms import (
    DegreeQueue,
    crossing_pairs,
    edge_is_clear,
    find_crossing,
    has_edge_crossings,
)
from untangle.models import Edge, Point


SQUARE = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def test_degree_queue_initial_order():
    queue = DegreeQueue(4)
    assert queue.ordered() == [0, 1, 2, 3]
    assert queue[0] == (0, 0)


def test_degree_queue_reorders_on_increment():
    queue = DegreeQueue(4)
    assert queue.increment(0) == 1
    assert queue.ordered() == [1, 2, 3, 0]
    queue.increment(2)
    queue.increment(1)
    assert queue.ordered() == [3, 0, 1, 2]
    assert queue[0] == (0, 3)
    assert queue.degree(2) == 1


def test_degree_queue_reflects_changes_mid_walk():
    queue = DegreeQueue(3)
    first = queue[0]
    queue.increment(first[1])
    assert queue[0] == (0, 1)
    assert len(queue) == 3


def test_square_diagonals_cross():
    edges = [Edge(0, 2), Edge(1, 3)]
    assert list(crossing_pairs(SQUARE, edges)) == [(Edge(0, 2), Edge(1, 3))]
    assert has_edge_crossings(SQUARE, edges)


def test_square_cycle_has_no_crossings():
    edges = [Edge(0, 1), Edge(1, 2), Edge(2, 3), Edge(0, 3)]
    assert find_crossing(SQUARE, edges) is None


def test_adjacent_edges_are_never_counted():
    # Both edges leave vertex 0 along the same ray; they overlap but share 0.
    points = [Point(0, 0), Point(1, 0), Point(2, 0)]
    assert not has_edge_crossings(points, [Edge(0, 1), Edge(0, 2)])


def test_edge_is_clear_rejects_edge_through_point():
    points = [Point(0, 0), Point(2, 0), Point(1, 0)]
    assert not edge_is_clear(points, [], 0, 1)
    assert edge_is_clear(points, [], 0, 2)


def test_edge_is_clear_rejects_crossing_edge():
    assert not edge_is_clear(SQUARE, [Edge(0, 2)], 1, 3)
    assert edge_is_clear(SQUARE, [Edge(0, 2)], 1, 2)
