"""
Lifesim — life-simulation game backend.

NPCs carry an emotional state that activities push around, that fades
between interactions, and that is read back as a named feeling for
display. This package holds that emotion engine and the tooling around it.

    emotion/   Plutchik vectors: pulls, decay, interpretation, activities
    cli/       Sandbox commands for exploring the engine
    config.py  Environment-driven settings
"""

__version__ = "0.1.0"
