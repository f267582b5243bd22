"""Application Layer.

Infrastructure adapters and the command-line interface that orchestrate
domain logic. This layer handles file I/O, argument parsing and output.
"""
