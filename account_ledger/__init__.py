"""
Account Ledger - Source Package

An in-memory account ledger: named accounts, each with a balance and an
ordered, undo-capable history of balance-affecting transactions.

DESIGN PRINCIPLES:
1. Balance always equals the signed sum of the history
2. Failed operations never change state
3. The initial deposit can never be undone
4. The ledger is caller-owned (no hidden global instance)
"""

__version__ = "1.0.0"
__author__ = "Account Ledger Team"
