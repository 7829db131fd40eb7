import pytest

from search import MissingQueryError, SearchResult, search_menus

MENUS = {
    "Frist": {
        "lunch": {
            "entrees": ["Cheese Pizza", "Grilled Chicken"],
            "sides": ["Caesar Salad"],
            "desserts": [],
            "other": []
        }
    },
    "Whitman": {
        "dinner": {
            "entrees": ["Chicken Parmesan"],
            "sides": [],
            "desserts": ["Chicken-Shaped Cookie"],
            "other": []
        },
        "late night": {
            "entrees": [],
            "sides": [],
            "desserts": [],
            "other": ["Pizza Bagel"]
        }
    }
}


def test_single_match_with_provenance():
    results = search_menus(
        {"Frist": {"lunch": {"entrees": ["Cheese Pizza"], "sides": [], "desserts": [], "other": []}}},
        "pizza"
    )

    assert results == [SearchResult(item="Cheese Pizza", hall="Frist", meal="lunch", category="entrees", day="today")]


def test_case_insensitive_and_in_menu_order():
    results = search_menus(MENUS, "CHICKEN", "friday")

    assert [(r.hall, r.meal, r.category, r.item) for r in results] == [
        ("Frist", "lunch", "entrees", "Grilled Chicken"),
        ("Whitman", "dinner", "entrees", "Chicken Parmesan"),
        ("Whitman", "dinner", "desserts", "Chicken-Shaped Cookie"),
    ]
    assert all(r.day == "friday" for r in results)


def test_no_match_is_empty_list():
    assert search_menus(MENUS, "sushi") == []


@pytest.mark.parametrize("query", [None, ""])
def test_missing_query_raises(query):
    with pytest.raises(MissingQueryError, match="Query parameter is required"):
        search_menus(MENUS, query)


def test_result_to_dict():
    result = SearchResult(item="Pizza Bagel", hall="Whitman", meal="late night", category="other", day="today")

    assert result.to_dict() == {
        "item": "Pizza Bagel",
        "hall": "Whitman",
        "meal": "late night",
        "category": "other",
        "day": "today",
    }
