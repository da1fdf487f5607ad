"""Testing helpers, requires the test extra (hypothesis)."""
