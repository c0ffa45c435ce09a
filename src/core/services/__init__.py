"""Generation services: word selection, clue generation, daily orchestration."""
