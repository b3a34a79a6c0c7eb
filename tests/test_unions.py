from __future__ import annotations

import pytest

from kinlayout import ParentEdge, Person, SpouseEdge, UnknownRootError, build_graph
from kinlayout.unions import RealUnion, VirtualRoot, assign_levels, build_unions


def _uids(unions) -> list[str]:
    return [u.uid for u in unions]


def test_levels_from_root(sample_people, sample_edges) -> None:
    g = build_graph(sample_people, sample_edges)
    levels = assign_levels(g, 1)

    assert levels == {1: 0, 6: -1, 7: -1, 3: 1, 4: 1, 2: 0, 8: -2, 9: -2, 10: -1, 11: 0}


def test_unions_and_tree_shape(sample_people, sample_edges) -> None:
    tree = build_unions(build_graph(sample_people, sample_edges), 1)

    assert tree.root.uid == "couple:1-2"
    assert tree.root.members == (1, 2)
    assert tree.root.level == 0
    assert tree.top.uid == "couple:8-9"
    assert tree.top.level == -2

    assert tree.by_uid["couple:8-9"].children == ["couple:6-7", "single:10"]
    assert tree.by_uid["couple:6-7"].children == ["couple:1-2"]
    # Ksenia (2014) is older than Arina (2019).
    assert tree.by_uid["couple:1-2"].children == ["single:4", "single:3"]
    assert tree.by_uid["single:10"].children == ["single:11"]

    assert tree.union_of_person[2] is tree.root
    assert tree.level_of[11] == 0


def test_unions_are_post_ordered(sample_people, sample_edges) -> None:
    tree = build_unions(build_graph(sample_people, sample_edges), 1)

    assert _uids(tree.unions) == [
        "single:4",
        "single:3",
        "couple:1-2",
        "couple:6-7",
        "single:11",
        "single:10",
        "couple:8-9",
    ]
    position = {u.uid: i for i, u in enumerate(tree.unions)}
    for union in tree.unions:
        for child in union.children:
            assert position[child] < position[union.uid]


def test_couple_members_are_male_first() -> None:
    people = [Person(1, "Wife", sex="female"), Person(2, "Husband", sex="male")]
    tree = build_unions(build_graph(people, [SpouseEdge(1, 2)]), 1)

    assert tree.root.uid == "couple:1-2"
    assert tree.root.members == (2, 1)


def test_couple_keeps_edge_order_without_sex() -> None:
    people = [Person(1, "A"), Person(2, "B")]
    tree = build_unions(build_graph(people, [SpouseEdge(2, 1)]), 1)

    assert tree.root.members == (2, 1)


def test_unknown_root() -> None:
    with pytest.raises(UnknownRootError) as exc:
        build_unions(build_graph([Person(1, "A")], []), 42)
    assert exc.value.root_id == 42


def test_unreachable_people_are_left_out() -> None:
    people = [Person(1, "A"), Person(2, "B"), Person(3, "Stranger")]
    tree = build_unions(build_graph(people, [ParentEdge(1, 2)]), 1)

    assert 3 not in tree.level_of
    assert "single:3" not in tree.by_uid
    assert _uids(tree.unions) == ["single:2", "single:1"]


def test_both_partners_with_parents_get_a_virtual_root() -> None:
    people = [
        Person(1, "Root", sex="male"),
        Person(2, "Wife", sex="female"),
        Person(6, "Father", sex="male", birth_date="01.01.1950"),
        Person(7, "Mother", sex="female"),
        Person(20, "Father-in-law", sex="male", birth_date="01.01.1955"),
        Person(21, "Mother-in-law", sex="female"),
    ]
    edges = [
        SpouseEdge(1, 2),
        SpouseEdge(6, 7),
        SpouseEdge(20, 21),
        ParentEdge(6, 1),
        ParentEdge(7, 1),
        ParentEdge(20, 2),
        ParentEdge(21, 2),
    ]
    tree = build_unions(build_graph(people, edges), 1)

    assert isinstance(tree.top, VirtualRoot)
    assert tree.top.level == -2
    assert tree.top.children == ["couple:6-7", "couple:20-21"]
    # The root couple hangs under the root's own parents.
    assert tree.by_uid["couple:6-7"].children == ["couple:1-2"]
    assert tree.by_uid["couple:20-21"].children == []
    assert tree.unions[-1] is tree.top


def test_undated_siblings_sort_by_id_after_dated_ones() -> None:
    people = [
        Person(1, "Parent"),
        Person(5, "No date"),
        Person(3, "No date either"),
        Person(4, "Dated", birth_date="01.01.2000"),
        Person(2, "Dated later", birth_date="01.01.2005"),
    ]
    edges = [ParentEdge(1, 5), ParentEdge(1, 3), ParentEdge(1, 4), ParentEdge(1, 2)]
    tree = build_unions(build_graph(people, edges), 1)

    assert tree.root.children == ["single:4", "single:2", "single:3", "single:5"]


def test_sibling_order_uses_descendant_dates() -> None:
    people = [
        Person(1, "Parent"),
        Person(2, "Undated elder"),
        Person(3, "Undated younger"),
        Person(4, "Grandchild", birth_date="01.01.1980"),
    ]
    edges = [ParentEdge(1, 2), ParentEdge(1, 3), ParentEdge(3, 4)]
    tree = build_unions(build_graph(people, edges), 1)

    assert tree.root.children == ["single:3", "single:2"]


def test_sibling_order_is_stable_across_runs(sample_people, sample_edges) -> None:
    first = _uids(build_unions(build_graph(sample_people, sample_edges), 1).unions)
    again = _uids(build_unions(build_graph(list(reversed(sample_people)), sample_edges), 1).unions)

    assert first == again


def test_couple_level_follows_first_discovered_partner() -> None:
    # 3 is 1's child and also married to 1's sibling 2: BFS reaches 3 as a child
    # (level 1) before reaching them as 2's spouse.
    people = [Person(0, "Grandparent"), Person(1, "Root"), Person(2, "Sibling"), Person(3, "Child")]
    edges = [ParentEdge(0, 1), ParentEdge(0, 2), ParentEdge(1, 3), SpouseEdge(2, 3)]
    tree = build_unions(build_graph(people, edges), 1)

    couple = tree.union_of_person[3]
    assert isinstance(couple, RealUnion)
    assert couple.is_couple
    assert tree.level_of[2] == tree.level_of[3] == couple.level
