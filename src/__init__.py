"""
Content Quality Analyzer

Text-heuristic quality checks for AI-assisted SEO content:
1. Detects and removes prohibited phrases (overused, filler, AI-typical)
2. Flags likely hallucinated claims
3. Scores E-E-A-T signals
4. Profiles regional search behaviour
5. Enforces quality gates over the results
"""

__version__ = "0.1.0"
