"""bedGraph output layer.

This package serializes interval values into bedGraph tracks
on files or standard output.
"""
