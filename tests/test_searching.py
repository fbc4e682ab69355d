import io

import pytest

from dsadrills.searching import binary_search, linear_search, main

SORTED = [-4, 0, 3, 7, 9, 15, 22]


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_every_element(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


@pytest.mark.parametrize("target", [-5, 1, 8, 23])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_binary_search_with_duplicates_hits_a_match():
    items = [1, 2, 2, 2, 3]
    assert items[binary_search(items, 2)] == 2


@pytest.mark.parametrize("target", [5, 1, 8, 2])
def test_linear_search_returns_first_index(target):
    items = [5, 1, 8, 1, 2, 8]
    assert linear_search(items, target) == items.index(target)


def test_linear_search_missing():
    assert linear_search([5, 1, 8], 4) is None


def test_linear_search_accepts_generators():
    assert linear_search((n * n for n in range(5)), 9) == 3


def test_main_binary_found(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n5 1 4\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    index = binary_search(sorted([5, 1, 4]), 4)
    assert out.rstrip().endswith(f"Element found at index: {index}")


def test_main_linear_found(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n5 1 4\n4\n"))
    assert main(["--linear"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith(f"Element found at index: {[5, 1, 4].index(4)}")


def test_main_not_found(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 2 7"))
    assert main([]) == 0
    assert capsys.readouterr().out.rstrip().endswith("Element not found")


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 two 7"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_missing_target(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 2"))
    assert main([]) == 1
    assert "end of input" in capsys.readouterr().err