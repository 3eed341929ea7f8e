"""MatchupMaster: breakpoint analysis and strategy prompts for Mechabellum."""
