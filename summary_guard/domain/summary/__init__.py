"""Domain services and prompt construction for profile summaries."""
