from statements.handlers.views import StatementView

__all__ = ["StatementView"]
