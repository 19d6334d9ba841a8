"""Tests for shared pagination helpers."""

import pytest
from sqlalchemy.orm import Session

from admin_backend.db.models import App
from admin_backend.services.listing import PageParams, contains, paginate, total_pages


@pytest.mark.parametrize(
    ("total", "page_size", "expected"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (101, 100, 2)],
)
def test_total_pages(total, page_size, expected):
    assert total_pages(total, page_size) == expected


def test_offset():
    assert PageParams().offset == 0
    assert PageParams(page=3, page_size=25).offset == 50


def test_paginate_counts_before_slicing(test_db: Session):
    test_db.add_all([App(id=f"app{i}", name=f"App {i}", desc="") for i in range(5)])
    test_db.commit()

    page = paginate(
        test_db.query(App).filter(App.id != "app0"),
        PageParams(page=2, page_size=3),
        (App.id,),
        lambda a: a.id,
    )
    assert page.data == ["app4"]
    assert page.meta.total == 4
    assert page.meta.total_pages == 2
    assert page.meta.page == 2


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        ("team", ["a", "b", "c"]),
        ("TEAM", ["a", "b", "c"]),
        ("_", ["b"]),
        ("%", ["c"]),
        ("\\", []),
    ],
)
def test_contains_matches_literal_substring(test_db: Session, term, expected):
    test_db.add_all(
        [
            App(id="a", name="Team Chat", desc=""),
            App(id="b", name="team_sync", desc=""),
            App(id="c", name="100% team", desc=""),
        ]
    )
    test_db.commit()

    ids = [
        a.id
        for a in test_db.query(App).filter(contains(App.name, term)).order_by(App.id)
    ]
    assert ids == expected
