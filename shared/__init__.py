"""
Shared Kernel

This module contains base classes and utilities shared across the booking
and directory contexts.
"""
