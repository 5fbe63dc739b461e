from backend.algorithms.grid_astar import Cell, ScoreTable


def entries(table):
    return [(tuple(c), s) for c, s in table]


def test_insert_keeps_ascending_order():
    t = ScoreTable()
    t.insert_score(Cell(0, 0), 30)
    t.insert_score(Cell(1, 0), 10)
    t.insert_score(Cell(2, 0), 20)
    assert entries(t) == [((1, 0), 10), ((2, 0), 20), ((0, 0), 30)]


def test_equal_scores_keep_insertion_order():
    t = ScoreTable()
    t.insert_score(Cell(0, 0), 5)
    t.insert_score(Cell(1, 0), 5)
    t.insert_score(Cell(2, 0), 1)
    t.insert_score(Cell(3, 0), 5)
    assert [tuple(c) for c, _ in t] == [(2, 0), (0, 0), (1, 0), (3, 0)]


def test_get_and_remove_act_on_first_entry():
    t = ScoreTable()
    t.insert_score(Cell(1, 1), 40)
    t.insert_score(Cell(1, 1), 12)  # no dedup: a second, lower entry
    assert len(t) == 2
    assert t.get_score(Cell(1, 1)) == 12
    assert t.remove_score(Cell(1, 1))
    assert t.get_score(Cell(1, 1)) == 40
    assert t.remove_score(Cell(1, 1))
    assert t.get_score(Cell(1, 1)) is None
    assert not t.remove_score(Cell(1, 1))


def test_missing_cell():
    t = ScoreTable()
    t.insert_score(Cell(0, 0), 0)
    assert t.get_score(Cell(5, 5)) is None
    assert not t.remove_score(Cell(5, 5))
    assert t.first() == Cell(0, 0)
