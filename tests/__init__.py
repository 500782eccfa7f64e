"""Test suite for finsets. Doctests embedded in the package are collected
alongside these modules.
"""
