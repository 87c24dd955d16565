"""
AI layer - Dungeon Master prompt construction.
"""
