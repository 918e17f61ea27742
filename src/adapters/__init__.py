"""I/O adapters: HTTP client for the Issuetrak API and response rendering."""
