import pytest

from builders import make_group, played

from groupstage.models import Competition, LeagueTable, Match


@pytest.fixture
def group_a():
    return make_group(
        "A",
        [("a1", "Albion"), ("a2", "Borough"), ("a3", "Celtic")],
        [
            played("m1", "a1", "a2", 3, 1),
            played("m2", "a2", "a3", 2, 2),
            Match(id="m3", team1_id="a1", team2_id="a3"),
        ],
    )


@pytest.fixture
def competition(group_a):
    group_b = make_group(
        "B",
        [("b1", "Dynamo"), ("b2", "Everton")],
        [played("m1", "b1", "b2", 0, 1)],
    )
    return Competition(preliminary_round=LeagueTable(groups=[group_a, group_b]), name="Cup")
