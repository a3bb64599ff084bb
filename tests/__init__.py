# --------------------------------------------------------------------
# Requirements: numpy, pytest
# --------------------------------------------------------------------
"""
evosearch Test Suite

CORE TESTS (run these for verification):
	pytest tests/strategies_test.py     # Variation strategies, scripted draws
	pytest tests/canonical_test.py      # Rotation/reflection canonical form
	pytest tests/solver_test.py         # Solver loop, budget, diversification

SUPPORT:
	random_source_test.py               # Seeded and scripted random sources
	strategy_pool_test.py               # Registry and ancestry weighting
	parent_line_test.py                 # Lineage and bounded populations
	progress_test.py                    # Per-generation tracking
	logger_test.py                      # File/console and level-aware logging
"""
