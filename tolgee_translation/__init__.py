"""
Tolgee translation provider: pushes, pulls and deletes catalogue translations
in a Tolgee project.
"""

__version__ = "0.1.0"
