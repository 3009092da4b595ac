"""
ESPN scoreboard API access.

Handles fetching raw scoreboard and summary payloads and normalizing them
into immutable game records for the UI.
"""
