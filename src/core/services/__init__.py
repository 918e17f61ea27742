"""Services: the operation registry and the single-issue submission mode."""
