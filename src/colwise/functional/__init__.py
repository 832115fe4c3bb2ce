"""Iteration primitives for colwise.

``loops`` holds explicit, pre-allocated ``for`` loops over columns; ``mapping``
holds the typed ``map_*`` helpers that replace them; ``summaries`` lifts
single-column summaries to whole tables with those helpers. Everything here
is stateless, so functions compose freely.
"""
