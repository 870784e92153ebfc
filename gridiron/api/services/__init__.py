"""API services for league storage and simulation."""

from gridiron.api.services.league_service import LeagueService, league_service

__all__ = ["LeagueService", "league_service"]
