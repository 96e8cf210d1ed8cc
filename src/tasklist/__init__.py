"""Tasklist - a terminal to-do list with an interactive task screen."""

__version__ = "0.1.0"
