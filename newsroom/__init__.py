"""Newsroom - top items from tech news sites, scraped or read from feeds."""
