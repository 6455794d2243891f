import pytest

from adventsolve.day8 import Graph, Node, parse_nodes, run, solve

COLLINEAR = ["0,0,0\n", "1,0,0\n", "10,0,0\n"]


def test_distance_and_symmetry():
    a = Node(0, 0, 0)
    b = Node(3, 4, 0)
    assert a.distance(b) == 5.0
    assert b.distance(a) == a.distance(b)
    assert a.distance(a) == 0.0


def test_node_display():
    assert str(Node(1, -2, 3)) == "(1,-2,3)"


def test_parse_nodes():
    assert parse_nodes(["1,2,3\n", "4,5,-6"]) == [Node(1, 2, 3), Node(4, 5, -6)]


@pytest.mark.parametrize("line", ["1,2\n", "a,b,c\n", "1,2,3,4\n", "\n"])
def test_parse_nodes_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_nodes([line])


def test_connect_creates_and_extends():
    a, b, c = Node(0, 0, 0), Node(1, 1, 1), Node(2, 2, 2)
    graph = Graph()
    assert graph.connect(a, b) is True
    assert graph.circuits == [{a, b}]
    graph.connect(c, a)
    assert graph.circuits == [{a, b, c}]


def test_connect_same_circuit_is_unchanged():
    a, b = Node(0, 0, 0), Node(1, 1, 1)
    graph = Graph()
    graph.connect(a, b)
    assert graph.connect(b, a) is True
    assert graph.circuits == [{a, b}]


def test_connect_merges_into_later_circuit():
    a, b, c = Node(0, 0, 0), Node(1, 1, 1), Node(2, 2, 2)
    graph = Graph()
    for node in (a, b, c):
        graph.insert(node)
    graph.connect(a, c)
    assert graph.circuits == [{b}, {a, c}]


def test_solve_collinear():
    assert solve(COLLINEAR) == 10


def test_solve_single_node_has_no_answer():
    assert solve(["5,5,5\n"]) is None


def test_run_prints_closing_pair(tmp_path, capsys):
    path = tmp_path / "junction.txt"
    path.write_text("".join(COLLINEAR), encoding="utf-8")
    assert run(str(path)) == 10
    assert "The coordinates: (1,0,0):(10,0,0) : 10" in capsys.readouterr().out