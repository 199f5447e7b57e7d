"""Argument-line parsing.

The parser layer turns a raw command argument string into search keywords and sort arguments, and
pulls typed tokens (integers, phone numbers, emails) out of free text.
"""
