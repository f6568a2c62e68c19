# tests/test_identifiers.py
from collections import OrderedDict

from dbcache.services.identifiers import build_identifier
from dbcache.services.repository import Repository


def test_associative_collection():
    assert build_identifier({"test": "1", "test2": "2"}) == ":test:1:test2:2:"


def test_positional_collection():
    assert build_identifier(["1", "2"]) == ":1:2:"
    assert build_identifier(("1", "2")) == ":1:2:"


def test_empty_collection():
    assert build_identifier({}) == ":"
    assert build_identifier([]) == ":"


def test_dense_integer_keys_are_positional():
    assert build_identifier({0: "a", 1: "b"}) == ":a:b:"


def test_sparse_or_shifted_integer_keys_are_associative():
    assert build_identifier({1: "a"}) == ":1:a:"
    assert build_identifier({1: "a", 0: "b"}) == ":1:a:0:b:"


def test_insertion_order_is_preserved():
    ordered = OrderedDict([("z", 1), ("a", 2)])
    assert build_identifier(ordered) == ":z:1:a:2:"


def test_repository_exposes_builder():
    assert Repository().build_identifier({"table": "users", "id": 7}) == ":table:users:id:7:"


def test_booleans_and_none_render_like_interpolated_strings():
    assert build_identifier([True, False, None, 0]) == ":1:::0:"
    assert build_identifier({"active": True, "deleted": False, "owner": None}) == ":active:1:deleted::owner::"
