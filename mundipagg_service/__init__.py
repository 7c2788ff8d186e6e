"""Mundipagg charge adapter and HTTP service."""
