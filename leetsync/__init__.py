"""LeetCode progress tracker with GitHub solution reconciliation."""
