"""ILearnCom - computer fundamentals lessons with quizzes and an AI study buddy."""

__version__ = "0.1.0"
