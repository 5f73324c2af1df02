"""Bet history and portfolio aggregation."""
