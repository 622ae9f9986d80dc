import pytest

from people_api.domain.shared.text import has_text
from people_api.infrastructure.database.repositories.person_repository import (
    build_people_query,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, False),
        ("", False),
        ("  ", False),
        ("\t\r\n\x0b\x0c", False),
        ("\u2003\u3000", False),
        ("a", True),
        (" a ", True),
        ("\u00a0", True),
        ("\u2007", True),
        ("\u202f", True),
        (" \u00a0 ", True),
    ],
)
def test_has_text(value, expected):
    assert has_text(value) is expected


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_name_builds_unfiltered_query(name):
    statement = build_people_query(name)

    assert statement.whereclause is None


def test_name_builds_single_equality_predicate():
    statement = build_people_query("Burak")
    compiled = statement.compile(compile_kwargs={"literal_binds": True})

    assert "WHERE person.name = 'Burak'" in str(compiled)


def test_name_is_compared_untrimmed():
    compiled = build_people_query(" Burak ").compile(
        compile_kwargs={"literal_binds": True}
    )

    assert "person.name = ' Burak '" in str(compiled)


@pytest.mark.parametrize("name", ["\u00a0", "\u2007", "\u202f"])
def test_no_break_space_name_builds_filtered_query(name):
    statement = build_people_query(name)

    assert statement.whereclause is not None
