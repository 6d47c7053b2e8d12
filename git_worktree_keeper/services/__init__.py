"""Services for discovering and classifying git worktrees."""
