"""
Price data models and parsing.

Turns raw CSV price records into typed observations and holds the summary
and crypto code models shared by the rest of the engine.
"""
