"""Type hints used in Group Stage."""

from typing import Callable, List, Sequence

# Identifiers
TeamId = str
MatchId = str
GroupName = str

# Wall-clock time as "HH:MM"
ClockTime = str

# Produces a fresh unplayed round robin for a group's teams
FixtureGenerator = Callable[[Sequence["TeamStat"]], List["Match"]]

#  LocalWords:  TeamStat
