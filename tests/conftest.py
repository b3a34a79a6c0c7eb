from __future__ import annotations

import pytest

from kinlayout import LayoutOptions, ParentEdge, Person, SpouseEdge


@pytest.fixture()
def sample_people() -> list[Person]:
    return [
        Person(1, "Dmitry", "Mogilevtsev", "Alexandrovich", "25.03.1991", "male"),
        Person(2, "Maria", "Sedletskaya", "Sergeevna", "23.01.1990", "female"),
        Person(3, "Arina", "Mogilevtseva", "Dmitrievna", "03.09.2019", "female"),
        Person(4, "Ksenia", "Mogilevtseva", "Dmitrievna", "02.04.2014", "female"),
        Person(6, "Alexander", "Mogilevtsev", "Vasilievich", "30.06.1965", "male"),
        Person(7, "Irina", "Mogilevtseva", "Nikolaevna", "09.01.1971", "female"),
        Person(8, "Nikolay", "Beda", "Sergeevich", "01.11.1944", "male"),
        Person(9, "Valentina", "Beda", "Ivanovna", "17.08.1948", "female"),
        Person(10, "Natalia", "Vopilova", "Sergeevna", "25.12.1969", "female"),
        Person(11, "Andrey", "Vopilov", "Alexandrovich", "25.01.2000", "male"),
    ]


@pytest.fixture()
def sample_edges() -> list:
    return [
        SpouseEdge(1, 2),
        SpouseEdge(6, 7),
        SpouseEdge(8, 9),
        ParentEdge(1, 3),
        ParentEdge(2, 3),
        ParentEdge(1, 4),
        ParentEdge(2, 4),
        ParentEdge(6, 1),
        ParentEdge(7, 1),
        ParentEdge(8, 7),
        ParentEdge(9, 7),
        ParentEdge(8, 10),
        ParentEdge(9, 10),
        ParentEdge(10, 11),
    ]


@pytest.fixture()
def edges_with_unknowns(sample_edges: list) -> list:
    # Ids 5, 12 and 13 are not among the sample people.
    return [
        *sample_edges,
        SpouseEdge(12, 13),
        ParentEdge(6, 5),
        ParentEdge(7, 5),
    ]


@pytest.fixture()
def spacious_options() -> LayoutOptions:
    return LayoutOptions.from_profile("spacious", root_id=1)


@pytest.fixture()
def compact_options() -> LayoutOptions:
    return LayoutOptions(root_id=1)
