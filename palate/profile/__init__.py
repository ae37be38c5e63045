"""
Taste profile engine.

Responsibilities:
- Seed an initial flavor vector from the tags a diner picks at registration.
- Nudge the vector after every feedback submission, less with every visit.
- Classify the vector into one of the fixed taste categories.
- Derive average vibe and confidence for the stored profile snapshot.
"""
