from fogwar.engine.geometry import WallEdge, los_clear


def wall(a, b):
    return WallEdge(a, b).canonical()


def test_los_blocked_by_wall_across_column():
    walls = {wall((4, 3), (4, 4))}
    assert los_clear((4, 1), (4, 6), walls) is False


def test_los_blocked_by_wall_on_far_side_of_corner():
    # The only wall touches the shared vertex from the destination tile.
    walls = {wall((3, 4), (4, 4))}
    assert los_clear((3, 3), (4, 4), walls) is False
    assert los_clear((4, 4), (3, 3), walls) is False


def test_los_blocked_at_last_vertex_of_long_diagonal():
    walls = {wall((5, 5), (6, 5)), wall((5, 5), (5, 6))}
    assert los_clear((3, 3), (6, 6), walls) is False


def test_los_clear_without_walls():
    assert los_clear((0, 0), (7, 3), set()) is True


def test_los_passes_beside_wall():
    walls = {wall((2, 2), (2, 3))}
    assert los_clear((1, 1), (1, 4), walls) is True


def test_los_oblique_line_crossing_wall():
    # Centre line from (0,0) to (3,2) crosses x=2 at y=1.5.
    walls = {wall((1, 1), (2, 1))}
    assert los_clear((0, 0), (3, 2), walls) is False


def test_los_oblique_line_through_sealed_corner():
    # Centre line from (0,0) to (3,1) passes the vertex (2,1).
    walls = {wall((1, 0), (2, 0))}
    assert los_clear((0, 0), (3, 1), walls) is False
    assert los_clear((3, 1), (0, 0), walls) is False


def test_los_is_symmetric():
    walls = {
        wall((1, 0), (2, 0)),
        wall((3, 3), (3, 4)),
        wall((4, 2), (5, 2)),
        wall((2, 5), (3, 5)),
        wall((5, 5), (5, 6)),
    }
    tiles = [(x, y) for x in range(7) for y in range(7)]
    for a in tiles:
        for b in tiles:
            assert los_clear(a, b, walls) == los_clear(b, a, walls), (a, b)
