import pytest

from groupstage.testing import NameStyle, RandomLeagueGenerator, ResultPattern, RLGConfig
import groupstage.testing.__main__ as cli
from groupstage.testing.__main__ import main
from groupstage.testing.rlg import group_name


def _all_matches(competition):
    return [m for g in competition.preliminary_round.groups for m in g.matches]


def test_same_seed_gives_same_competition():
    config = RLGConfig(num_groups=3, teams_per_group=5, seed=42)

    first = RandomLeagueGenerator(config).generate_complete_competition()
    second = RandomLeagueGenerator(config).generate_complete_competition()

    assert first == second


def test_competition_shape_and_schedule():
    config = RLGConfig(num_groups=2, teams_per_group=4, seed=3, court_count=2)

    competition = RandomLeagueGenerator(config).create_competition()

    groups = competition.preliminary_round.groups
    assert [g.name for g in groups] == ["A", "B"]
    assert groups[0].team_ids == ["T001", "T002", "T003", "T004"]
    for group in groups:
        assert len(group.matches) == 6
        assert [m.court for m in group.matches[:2]] == [1, 2]
        assert all(not m.played for m in group.matches)


@pytest.mark.parametrize("pattern", list(ResultPattern))
def test_simulated_standings_are_consistent(pattern):
    config = RLGConfig(num_groups=2, teams_per_group=5, seed=11, result_pattern=pattern)

    competition = RandomLeagueGenerator(config).generate_complete_competition()

    for group in competition.preliminary_round.groups:
        assert all(m.played for m in group.matches)
        assert sum(s.goals_for for s in group.teams) == sum(s.goals_against for s in group.teams)
        assert sum(s.wins for s in group.teams) == sum(s.losses for s in group.teams)
        assert all(s.played == 4 for s in group.teams)
        draws = sum(1 for m in group.matches if m.team1_score == m.team2_score)
        decisive = len(group.matches) - draws
        assert sum(s.points for s in group.teams) == 3 * decisive + 2 * draws


def test_shootouts_award_two_and_one():
    config = RLGConfig(
        num_groups=1, teams_per_group=6, seed=5, result_pattern=ResultPattern.BALANCED, shootout_rate=1.0
    )

    group = RandomLeagueGenerator(config).generate_complete_competition().preliminary_round.groups[0]

    level = [m for m in group.matches if m.team1_score == m.team2_score]
    assert all(m.winner_id in (m.team1_id, m.team2_id) for m in level)
    assert sum(s.points for s in group.teams) == 3 * len(group.matches)


def test_nothing_played_at_zero_completion():
    config = RLGConfig(num_groups=2, seed=1, completion_rate=0.0)

    competition = RandomLeagueGenerator(config).generate_complete_competition()

    assert not any(m.played for m in _all_matches(competition))
    assert all(s.points == 0 for g in competition.preliminary_round.groups for s in g.teams)


def test_japanese_names():
    config = RLGConfig(num_groups=1, teams_per_group=4, seed=2, name_style=NameStyle.JAPANESE)

    group = RandomLeagueGenerator(config).create_competition().preliminary_round.groups[0]

    assert all(not s.team.name.isascii() for s in group.teams)


def test_group_names_continue_past_z():
    assert [group_name(i) for i in (0, 25, 26, 27)] == ["A", "Z", "A2", "B2"]


def test_cli_generate(capsys):
    assert main(["generate", "--seed", "1", "--groups", "2"]) == 0

    output = capsys.readouterr().out
    assert "Group A" in output
    assert "Group B" in output


def test_cli_move(capsys):
    exit_code = main(["move", "--seed", "1", "--groups", "2", "--team", "T001", "--from", "A", "--to", "B"])

    assert exit_code == 0
    assert "Moved T001 from group A to group B" in capsys.readouterr().out


def test_cli_move_to_unknown_group_is_rejected(capsys):
    exit_code = main(["move", "--seed", "1", "--team", "T001", "--from", "A", "--to", "Q"])

    assert exit_code == 1
    assert "Move rejected" in capsys.readouterr().out


def test_interactive_mode_falls_back_without_prompt_toolkit(monkeypatch, capsys):
    monkeypatch.setattr(cli, "PROMPT_TOOLKIT_AVAILABLE", False)

    assert main(["--interactive"]) == 0

    output = capsys.readouterr().out
    assert "prompt_toolkit not installed" in output
    assert "pip install groupstage[cli]" in output
