# tests/test_matcher.py

from __future__ import annotations

from gedcom_compare.matching import (
    Correspondence,
    Side,
    add_manual_match,
    auto_match,
    compute_differences,
    match_for_person,
    remove_match,
    unmatched_of,
)


def _assert_partial_bijection(matches) -> None:
    lefts = [m.left_id for m in matches]
    rights = [m.right_id for m in matches]
    assert len(lefts) == len(set(lefts))
    assert len(rights) == len(set(rights))


def test_auto_match_similar_names_same_birth(make_person, make_set) -> None:
    left = make_set("a.ged", make_person("I1", "John Smith", "1900"))
    right = make_set("b.ged", make_person("I2", "Jon Smith", "1900"))

    assert auto_match(left, right) == (
        Correspondence(left_id="I1", right_id="I2", manual=False, differences=()),
    )


def test_auto_match_needs_birth_date_on_both_sides(make_person, make_set) -> None:
    left = make_set("a.ged", make_person("I1", "John Smith", "1900"))
    right = make_set("b.ged", make_person("I2", "Jon Smith"))

    assert auto_match(left, right) == ()


def test_auto_match_is_first_fit_not_best_fit(make_person, make_set) -> None:
    # I1 grabs P1 (first compatible) even though P2 is an exact match; I2 then
    # can only take what is left.
    left = make_set(
        "a.ged",
        make_person("I1", "Jon Smith", "1900"),
        make_person("I2", "John Smith", "1900"),
    )
    right = make_set(
        "b.ged",
        make_person("P1", "John Smith", "1900"),
        make_person("P2", "Jon Smith", "1900"),
    )

    matches = auto_match(left, right)
    assert [(m.left_id, m.right_id) for m in matches] == [("I1", "P1"), ("I2", "P2")]


def test_auto_match_consumed_right_is_skipped(make_person, make_set) -> None:
    left = make_set(
        "a.ged",
        make_person("I1", "John Smith", "1900"),
        make_person("I2", "John Smith", "1900"),
    )
    right = make_set("b.ged", make_person("P1", "John Smith", "1900"))

    matches = auto_match(left, right)
    assert [(m.left_id, m.right_id) for m in matches] == [("I1", "P1")]
    _assert_partial_bijection(matches)


def test_auto_match_records_differences(make_person, make_set) -> None:
    left = make_set("a.ged", make_person("I1", "Mary Brown", "1902", sex="F"))
    right = make_set("b.ged", make_person("P1", "Mary Browne", "1902"))

    (match,) = auto_match(left, right)
    assert match.differences == ('Sex: "F" vs "N/A"',)


def test_compute_differences_sex_only(make_person) -> None:
    diffs = compute_differences(make_person("I1", sex="M"), make_person("I2"))
    assert diffs == ('Sex: "M" vs "N/A"',)


def test_compute_differences_fixed_order(make_person) -> None:
    left = make_person("I1", sex="M", death_place="Paris", birth_place="Rome")
    right = make_person("I2", birth="1900", sex="F", death_date="1950")

    assert compute_differences(left, right) == (
        'Birth Date: "N/A" vs "1900"',
        'Birth Place: "Rome" vs "N/A"',
        'Death Date: "N/A" vs "1950"',
        'Death Place: "Paris" vs "N/A"',
        'Sex: "M" vs "F"',
    )


def test_compute_differences_omits_equal_and_both_absent(make_person) -> None:
    left = make_person("I1", birth="1900", birth_place="Rome")
    right = make_person("I2", birth="1900", birth_place="Rome")
    assert compute_differences(left, right) == ()


def test_add_manual_match_replaces_conflicting_matches(make_person, make_set) -> None:
    left = make_set("a.ged", make_person("I1"), make_person("I2"))
    right = make_set("b.ged", make_person("P1"), make_person("P2", sex="F"))
    matches = (
        Correspondence("I1", "P1"),
        Correspondence("I2", "P2"),
    )

    updated = add_manual_match(matches, left, right, "I1", "P2")

    assert updated == (Correspondence("I1", "P2", manual=True, differences=('Sex: "N/A" vs "F"',)),)
    _assert_partial_bijection(updated)


def test_add_manual_match_unknown_id_adds_nothing(make_person, make_set) -> None:
    left = make_set("a.ged", make_person("I1"))
    right = make_set("b.ged", make_person("P1"))
    matches = (Correspondence("I1", "P1"),)

    assert add_manual_match(matches, left, right, "I404", "P404") == matches
    # Existing matches of a resolvable id are still dropped.
    assert add_manual_match(matches, left, right, "I1", "P404") == ()


def test_add_then_remove_restores_set(make_person, make_set) -> None:
    left = make_set("a.ged", make_person("I1"), make_person("I2"))
    right = make_set("b.ged", make_person("P1"), make_person("P2"))
    before = (Correspondence("I1", "P1"),)

    added = add_manual_match(before, left, right, "I2", "P2")
    assert len(added) == 2

    removed = remove_match(added, "I2", "P2")
    assert set(removed) == set(before)


def test_remove_match_requires_exact_pair() -> None:
    matches = (Correspondence("I1", "P1"), Correspondence("I2", "P2"))

    assert remove_match(matches, "I1", "P2") == matches
    assert remove_match(matches, "I1", "P1") == (Correspondence("I2", "P2"),)


def test_unmatched_of_each_side(make_person, make_set) -> None:
    left = make_set("a.ged", make_person("I1"), make_person("I2"), make_person("I3"))
    right = make_set("b.ged", make_person("P1"), make_person("P2"))
    matches = (Correspondence("I2", "P1"),)

    assert [r.id for r in unmatched_of(Side.LEFT, left.records, matches)] == ["I1", "I3"]
    assert [r.id for r in unmatched_of(Side.RIGHT, right.records, matches)] == ["P2"]


def test_match_for_person_by_side() -> None:
    matches = (Correspondence("I1", "P1"), Correspondence("I2", "P2"))

    assert match_for_person(matches, "I2", Side.LEFT) == matches[1]
    assert match_for_person(matches, "P1", Side.RIGHT) == matches[0]
    assert match_for_person(matches, "P1", Side.LEFT) is None


def test_correspondence_round_trips_through_dict() -> None:
    match = Correspondence("I1", "P1", manual=True, differences=('Sex: "M" vs "N/A"',))
    data = match.to_dict()

    assert data == {
        "leftId": "I1",
        "rightId": "P1",
        "manual": True,
        "differences": ['Sex: "M" vs "N/A"'],
    }
    assert Correspondence.from_dict(data) == match
