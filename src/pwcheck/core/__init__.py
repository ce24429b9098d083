# SPDX-License-Identifier: MIT
"""Core data structures, exceptions and display masking."""
