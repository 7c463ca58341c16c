"""Testing helpers – in-memory doubles for flagkit ports."""
