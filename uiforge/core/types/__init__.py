# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
UIForge Types Package - Public API

This package provides the unified types interface for UIForge. All value
types, path elements and constants are available through this single
namespace to support the standard import pattern:
`from uiforge.core import types as uf`

**Internal Module Organization:**
- constants.py: named angles, library defaults and numeral tables
- graphics.py: Point, Rect, CornerRadii and the path elements

**Usage:**
```python
from uiforge.core import types as uf

rect = uf.Rect(200, 100)
radii = uf.CornerRadii.vertical(top=12)
```
"""

from .constants import *
from .graphics import *
