# tests/test_catalog_service.py
import json

import pytest

from homescreen.core.constants import DEFAULT_GAMES, DEFAULT_PLAYERS, EPOCH
from homescreen.services.catalog_service import CatalogService


@pytest.fixture()
def catalog_path(tmp_path):
    return tmp_path / "catalog.json"


def write(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def test_missing_file_uses_builtin_catalog(catalog_path):
    catalog = CatalogService(catalog_path).load_catalog()
    assert [p.id for p in catalog.players] == [p["id"] for p in DEFAULT_PLAYERS]
    assert [g.id for g in catalog.games] == [g["id"] for g in DEFAULT_GAMES]


def test_broken_file_uses_builtin_catalog(catalog_path):
    catalog_path.write_text("[[[", encoding="utf-8")
    catalog = CatalogService(catalog_path).load_catalog()
    assert len(catalog.players) == len(DEFAULT_PLAYERS)


def test_loads_entries_in_declaration_order(catalog_path):
    write(
        catalog_path,
        {
            "players": [
                {"id": 5, "name": "Ådne", "icon": "a.png"},
                {"id": 1, "name": "Bea", "icon": "b.png"},
            ],
            "games": [
                {"id": 2, "title": "Kart", "icon": "k.png"},
                {"id": 44, "title": "Zelda", "icon": "z.png"},
            ],
        },
    )
    catalog = CatalogService(catalog_path).load_catalog()

    assert [p.name for p in catalog.players] == ["Ådne", "Bea"]
    assert [g.id for g in catalog.games] == [2, 44]
    assert all(g.last_played == EPOCH for g in catalog.games)


def test_malformed_entries_are_skipped(catalog_path):
    write(
        catalog_path,
        {
            "players": [{"name": "No id"}, {"id": "7", "name": "String id"}, {"id": 1, "name": "Ok"}],
            "games": ["not an object", {"id": 3, "title": "Ok", "icon": ""}],
        },
    )
    catalog = CatalogService(catalog_path).load_catalog()
    assert [p.id for p in catalog.players] == [1]
    assert [g.id for g in catalog.games] == [3]


def test_duplicate_ids_keep_the_first_entry(catalog_path):
    write(
        catalog_path,
        {
            "players": [],
            "games": [
                {"id": 3, "title": "First", "icon": ""},
                {"id": 3, "title": "Second", "icon": ""},
            ],
        },
    )
    catalog = CatalogService(catalog_path).load_catalog()
    assert [g.title for g in catalog.games] == ["First"]


def test_missing_icon_defaults_to_empty(catalog_path):
    write(catalog_path, {"players": [{"id": 1, "name": "P"}], "games": []})
    assert CatalogService(catalog_path).load_catalog().players[0].icon == ""


def test_undecodable_file_uses_builtin_catalog(catalog_path):
    catalog_path.write_bytes(b'{"players": [{"id": 1, "name": "\xff\xfe"}], "games": []}')
    catalog = CatalogService(catalog_path).load_catalog()
    assert [p.id for p in catalog.players] == [p["id"] for p in DEFAULT_PLAYERS]
