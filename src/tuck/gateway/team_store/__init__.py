"""Team roster persistence gateway.

Import from submodules:
- abc: TeamStore, TeamLoad
- real: JsonTeamStore
- fake: FakeTeamStore
"""
