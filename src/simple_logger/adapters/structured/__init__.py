"""Backends writing into operating-system log facilities."""
