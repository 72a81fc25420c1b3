"""
Utility functions module.

Month Semantics:
- Dataset months are ``YYYY-MM-01`` strings and are the lookup key for every
  price series; positions in one series say nothing about another series
- Month distances are counted on calendar-month fields, never elapsed days
"""
