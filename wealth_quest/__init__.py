"""Wealth Quest: a financial-literacy board game engine and its leaderboard API."""
