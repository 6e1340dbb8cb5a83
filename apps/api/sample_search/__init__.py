"""Organisation-scoped sample search API and its browsing client."""
