"""Evaluator, special forms and the application engine."""
