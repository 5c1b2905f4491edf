"""Game logic for a top-down 2D parking game: objects, collisions, vehicle physics, scoring, sound, textures and menu state."""

__version__ = "0.1.0"