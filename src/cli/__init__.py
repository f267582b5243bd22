"""Command-line interface for the CommNet calculator.

Parses raw device specifiers, loads device files through infrastructure
adapters, runs the link service and renders the report.
"""
