"""
Crypto Recommendation App - Price Summary and Ranking Engine

Parses per-crypto CSV price files, computes oldest/newest/min/max prices and
the normalized range over a period, keeps a history of computed summaries and
ranks cryptos by normalized range.
"""

__version__ = "0.1.0"
__author__ = "CryptoRec Team"
