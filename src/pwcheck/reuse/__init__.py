# SPDX-License-Identifier: MIT
"""Password reuse grouping."""

from .groups import find_reuse_groups, MIN_GROUP_SIZE

__all__ = ["find_reuse_groups", "MIN_GROUP_SIZE"]
