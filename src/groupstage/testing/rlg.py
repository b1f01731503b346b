"""Random League Generator (RLG) - Internal testing system for the standings engine.

This module generates realistic group-stage competitions: teams with hidden
strengths, round-robin fixtures scheduled onto courts, and simulated results
entered through the same result path a caller would use.
"""

# Group Stage
# Copyright (C) 2025  Group Stage developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import copy
import math
import random
import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from groupstage.constants import (
    DEFAULT_MATCH_DURATION_MINUTES,
    DEFAULT_REST_MINUTES,
    DEFAULT_START_TIME,
)
from groupstage.league import apply_match_result, schedule_group_matches
from groupstage.models import (
    Competition,
    Group,
    LeagueTable,
    Match,
    ScheduleConfig,
    Team,
    TeamStat,
)
from groupstage.pairing import generate_fixtures
from groupstage.utils import setup_logger

logger = setup_logger(__name__)


class ResultPattern(Enum):
    """Result generation patterns for simulated matches."""

    REALISTIC = "realistic"
    BALANCED = "balanced"
    HIGH_SCORING = "high_scoring"
    RANDOM = "random"


class NameStyle(Enum):
    """Naming of generated teams."""

    LATIN = "latin"
    JAPANESE = "japanese"
    MIXED = "mixed"


LATIN_NAMES = [
    "Albion", "Borough", "Celtic", "Dynamo", "Everton", "Fulham", "Galaxy",
    "Harbour", "Inter", "Juventus", "Kings", "Lions", "Mariners", "Nomads",
    "Olympic", "Phoenix", "Rangers", "Sporting", "Titans", "United",
]

JAPANESE_NAMES = [
    "あおば", "いなほ", "うみかぜ", "えにし", "おおぞら", "かがやき", "きずな",
    "さくら", "すばる", "たいよう", "つばさ", "なでしこ", "ひかり", "みらい",
    "アスリート", "イーグルス", "ウィングス", "サンダース", "スターズ", "ファルコン",
]


@dataclass
class RLGConfig:
    """Configuration for Random League Generator."""

    num_groups: int = 4
    teams_per_group: int = 4
    seed: Optional[int] = None
    result_pattern: ResultPattern = ResultPattern.REALISTIC
    name_style: NameStyle = NameStyle.LATIN
    completion_rate: float = 1.0
    shootout_rate: float = 0.0
    court_count: int = 2
    start_time: Optional[str] = DEFAULT_START_TIME
    match_duration_minutes: Optional[int] = DEFAULT_MATCH_DURATION_MINUTES
    rest_minutes: Optional[int] = DEFAULT_REST_MINUTES

    @property
    def schedule(self) -> ScheduleConfig:
        return ScheduleConfig(
            court_count=self.court_count,
            start_time=self.start_time,
            match_duration_minutes=self.match_duration_minutes,
            rest_minutes=self.rest_minutes,
        )


def group_name(index: int) -> str:
    """Group names run A, B, ... Z, then A2, B2, ..."""
    letter = string.ascii_uppercase[index % 26]
    cycle = index // 26
    return letter if cycle == 0 else f"{letter}{cycle + 1}"


class TeamFactory:
    """Factory for creating teams and their hidden strengths."""

    def __init__(self, config: RLGConfig, rng: random.Random):
        self.config = config
        self.random = rng

    def create_teams(self, count: int) -> Tuple[List[Team], Dict[str, float]]:
        """Create ``count`` teams with a strength each."""
        names = self._name_pool()
        self.random.shuffle(names)
        teams = []
        strengths = {}
        for i in range(count):
            base = names[i % len(names)]
            name = base if i < len(names) else f"{base} {i // len(names) + 1}"
            team = Team(id=f"T{i + 1:03d}", name=name)
            teams.append(team)
            strengths[team.id] = self.random.uniform(0.5, 1.5)

        logger.info(f"Created {len(teams)} teams with {self.config.name_style.value} names")
        return teams, strengths

    def _name_pool(self) -> List[str]:
        if self.config.name_style == NameStyle.JAPANESE:
            return list(JAPANESE_NAMES)
        if self.config.name_style == NameStyle.MIXED:
            return list(LATIN_NAMES) + list(JAPANESE_NAMES)
        return list(LATIN_NAMES)


class ResultSimulator:
    """Simulates match scores."""

    def __init__(self, config: RLGConfig, rng: random.Random):
        self.config = config
        self.random = rng

    def simulate_score(self, strength1: float, strength2: float) -> Tuple[int, int]:
        """Return (team1 goals, team2 goals)."""
        if self.config.result_pattern == ResultPattern.RANDOM:
            return self.random.randint(0, 5), self.random.randint(0, 5)
        if self.config.result_pattern == ResultPattern.BALANCED:
            return self._poisson(1.2), self._poisson(1.2)
        if self.config.result_pattern == ResultPattern.HIGH_SCORING:
            return self._poisson(2.5 * strength1), self._poisson(2.5 * strength2)
        return self._poisson(1.4 * strength1 / strength2), self._poisson(
            1.4 * strength2 / strength1
        )

    def decide_shootout(self, match: Match) -> Optional[str]:
        """Pick a shootout winner for a level score, or None for a draw."""
        if self.random.random() >= self.config.shootout_rate:
            return None
        return self.random.choice([match.team1_id, match.team2_id])

    def _poisson(self, mean: float) -> int:
        # Knuth's method; means here are small
        limit = math.exp(-mean)
        goals = 0
        product = self.random.random()
        while product > limit:
            goals += 1
            product *= self.random.random()
        return goals


class RandomLeagueGenerator:
    """Builds random competitions for exercising the standings engine."""

    def __init__(self, config: RLGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )
        self.team_factory = TeamFactory(config, self.random)
        self.result_simulator = ResultSimulator(config, self.random)
        self.strengths: Dict[str, float] = {}

    def create_competition(self) -> Competition:
        """Create a competition with scheduled, unplayed fixtures."""
        total = self.config.num_groups * self.config.teams_per_group
        teams, self.strengths = self.team_factory.create_teams(total)

        groups = []
        for index in range(self.config.num_groups):
            start = index * self.config.teams_per_group
            members = teams[start:start + self.config.teams_per_group]
            group = Group(name=group_name(index), teams=[TeamStat(team=t) for t in members])
            group.matches = generate_fixtures(group.teams)
            if self.config.schedule.has_timing:
                group.matches = schedule_group_matches(group.matches, self.config.schedule)
            groups.append(group)

        logger.info(
            f"Created competition with {len(groups)} groups of "
            f"{self.config.teams_per_group} teams"
        )
        return Competition(
            preliminary_round=LeagueTable(groups=groups),
            name=f"RLG seed {self.config.seed}" if self.config.seed is not None else "RLG",
        )

    def simulate_results(self, competition: Competition) -> Competition:
        """Return a copy of ``competition`` with results entered.

        Each unplayed match is played with probability ``completion_rate``;
        results go through ``apply_match_result`` one at a time.
        """
        new_competition = copy.deepcopy(competition)
        groups = new_competition.preliminary_round.groups
        for index, group in enumerate(groups):
            for match in list(group.matches or []):
                if match.played or self.random.random() >= self.config.completion_rate:
                    continue
                group = apply_match_result(group, self._play(match)).unwrap()
            groups[index] = group
        return new_competition

    def generate_complete_competition(self) -> Competition:
        """Create a competition and simulate its results."""
        return self.simulate_results(self.create_competition())

    def _play(self, match: Match) -> Match:
        score1, score2 = self.result_simulator.simulate_score(
            self.strengths.get(match.team1_id, 1.0),
            self.strengths.get(match.team2_id, 1.0),
        )
        played = copy.copy(match)
        played.team1_score = score1
        played.team2_score = score2
        played.played = True
        played.winner_id = (
            self.result_simulator.decide_shootout(match) if score1 == score2 else None
        )
        return played
