import itertools

from roadnav.path_planner.grid_rasterizer import rasterize_roads, region_cell_range
from roadnav.path_planner.map_model import GridNode, Region


def test_every_cell_in_box_is_a_node(make_region):
    graph = rasterize_roads([make_region("A", 2, -1, 5, 3)])

    expected = {GridNode(x, z) for x, z in itertools.product(range(2, 6), range(-1, 4))}
    assert set(graph) == expected
    assert len(graph) == 4 * 5


def test_corner_order_does_not_matter():
    shuffled = Region.FromRaw("A", [[5, 0, 3], [2, 0, -1], [2, 0, 3], [5, 0, -1]])
    graph = rasterize_roads([shuffled])

    assert region_cell_range(shuffled) == (2, 5, -1, 3)
    assert len(graph) == 20


def test_overlapping_regions_collapse(make_region):
    graph = rasterize_roads([make_region("A", 0, 0, 4, 0), make_region("B", 2, 0, 6, 0)])

    nodes = list(graph)
    assert len(nodes) == len(set(nodes)) == 7
    assert graph.raw_count == 10


def test_no_node_outside_regions(make_region):
    graph = rasterize_roads([make_region("A", 0, 0, 2, 2), make_region("B", 10, 10, 11, 11)])

    assert GridNode(5, 5) not in graph
    assert GridNode(3, 0) not in graph
    assert len(graph) == 9 + 4


def test_malformed_regions_are_skipped(make_region):
    too_few = Region.FromRaw("short", [[0, 0, 0], [3, 0, 0], [3, 0, 3]])
    bad_corner = Region.FromRaw("bad", [[0, 0, 0], "oops", [3, 0, 3], [0, 0, 3]])
    graph = rasterize_roads([too_few, bad_corner, "not a region", None, make_region("ok", 0, 0, 1, 0)])

    assert set(graph) == {GridNode(0, 0), GridNode(1, 0)}


def test_non_finite_corners_are_skipped(make_region):
    infinite = Region.FromRaw("inf", [[0, 0, 0], [float("inf"), 0, 0], [3, 0, 3], [0, 0, 3]])
    not_a_number = Region.FromRaw("nan", [[0, 0, 0], [3, 0, 0], [3, 0, float("nan")], [0, 0, 3]])
    graph = rasterize_roads([infinite, not_a_number, make_region("ok", 0, 0, 1, 0)])

    assert infinite.Bounds() is None
    assert not_a_number.Bounds() is None
    assert set(graph) == {GridNode(0, 0), GridNode(1, 0)}


def test_fractional_bounds_keep_inner_cells():
    region = Region.FromRaw("frac", [[0.5, 0, 0.2], [2.7, 0, 0.2], [2.7, 0, 1.9], [0.5, 0, 1.9]])

    assert region_cell_range(region) == (1, 2, 1, 1)
    assert set(rasterize_roads([region])) == {GridNode(1, 1), GridNode(2, 1)}


def test_empty_input_gives_empty_graph():
    graph = rasterize_roads([])

    assert graph.IsEmpty()
    assert graph.AsArray().shape == (0, 2)


def test_neighbors_are_four_connected(make_region):
    graph = rasterize_roads([make_region("A", 0, 0, 2, 2)])

    assert set(graph.Neighbors(GridNode(1, 1))) == {
        GridNode(2, 1), GridNode(0, 1), GridNode(1, 2), GridNode(1, 0)
    }
    assert set(graph.Neighbors(GridNode(0, 0))) == {GridNode(1, 0), GridNode(0, 1)}
