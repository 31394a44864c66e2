"""
FinPlan Contracts - Source Package

The validation-and-normalization boundary for a personal finance
application. Untrusted API input goes in; either a canonical record
or a complete list of field-level errors comes out.

DESIGN PRINCIPLES:
1. Report every problem in one pass
2. Fail early, fail visibly
3. No silent corrections (only the documented normalizations)
4. Contracts are configuration, built once and never mutated
5. Create and update rules can never drift apart
"""

__version__ = "1.0.0"
__author__ = "FinPlan Team"
