"""Core models, league container and collaborator interfaces."""
