"""
GameHub - Mini-games shared through conversation messages.

A menu of games plus "Guess the Number". Game state travels inside
message URLs so a conversation partner can pick up or view a game.
The package provides:
- Game state and guessing rules
- A state codec for message URLs
- Ephemeral sessions and a menu/game navigator
- A REST API and a command-line client
"""

__version__ = "0.1.0"
