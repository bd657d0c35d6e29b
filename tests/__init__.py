"""
Test suite for the event planning agent.

Run with:
$ pytest -q
"""
