"""Interactive manual workout entry."""
