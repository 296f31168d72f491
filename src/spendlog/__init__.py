"""spendlog - local-only personal expense tracker."""

__version__ = "0.1.0"
