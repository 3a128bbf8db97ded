import io

from contestkit.union_find import UnionFind, main


def test_initial_state():
    n = 5
    sets = UnionFind(n)
    assert sets.components == n
    assert all(sets.find(x) == x for x in range(n + 1))
    assert all(sets.size(x) == 1 for x in range(n + 1))


def test_unite_merges_once():
    n = 5
    sets = UnionFind(n)
    assert sets.unite(1, 2)
    assert not sets.unite(2, 1)
    assert sets.find(1) == sets.find(2)
    assert sets.components == n - 1
    assert sets.size(1) == sets.size(2) == 2


def test_chain_gives_single_component():
    n = 10
    sets = UnionFind(n)
    for x in range(1, n):
        assert sets.unite(x, x + 1)
    assert sets.components == 1
    assert sets.size(1) == n
    assert len({sets.find(x) for x in range(1, n + 1)}) == 1


def test_separate_sets_stay_apart():
    sets = UnionFind(6)
    sets.unite(1, 2)
    sets.unite(3, 4)
    assert sets.find(1) != sets.find(3)
    sets.unite(2, 4)
    assert sets.find(1) == sets.find(3)
    assert sets.size(4) == 4


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 4\n1 1 2\n2 1 2\n2 2 1\n1 2 1\n"))
    main([])
    assert capsys.readouterr().out == "0\n1\n0\n1\n"