"""Team partitioning engine.

Sub-modules:
- partition    – balanced company-mixing team builder
- distribution – per-team company count recalculation
- editing      – manual roster edits (move / hold / place / remove team)
"""
