"""Core models shared by the randomizer, evolution and CLI packages."""
