"""Routing — filesystem-convention-to-route-table compiler.

Tokenize page paths, thread them into a nested tree, sort siblings by
match precedence, and normalize index routes.
"""
