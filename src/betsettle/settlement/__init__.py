"""Pool odds, fixed-point payouts and per-bet settlement."""
