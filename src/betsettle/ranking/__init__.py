"""Trust score, rank ladder, leaderboard and achievements."""
