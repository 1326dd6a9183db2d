"""
Anidle Constants Module

Centralized constants for the Anidle application.
"""

from .cli import CLICommands, CLIDefaults, CLIHelp, CLIMessages, PromptCommands
from .game import AttributeNames, GameRules, RevealLinks
from .system import Application, FileSystem, Logging

__all__ = [
    "Application",
    "AttributeNames",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "FileSystem",
    "GameRules",
    "Logging",
    "PromptCommands",
    "RevealLinks",
]
