"""
TUI Follower Results Viewer.

A Textual-based terminal UI that analyzes two Instagram exports and shows
the three account categories in tabs.

Usage:
    python -m follow_tracker.tui.app followers_1.json following.json

Components:
    - FollowTrackerApp: Main application class
    - ResultsScreen: Summary panel and one table per category
"""
