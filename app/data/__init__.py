"""
Data layer.

Design rules (gallery pattern):
- Views read sample tables ONLY through this package.
- Fixtures are static; anything random is seeded or takes an explicit RNG.
- No env var reads here (config-only).
"""
