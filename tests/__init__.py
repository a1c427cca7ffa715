"""Test suite for the game_of_life package."""
