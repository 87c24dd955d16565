"""
StoryQuest API - campaigns, characters and an AI Dungeon Master.
"""
__version__ = "1.0.0"
